"""
barcodestudio: checksum, validation and encoding rules for 1D and 2D barcodes.
"""

__version__ = "0.1.0"
