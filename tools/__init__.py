"""
Command line tools for barcodestudio.
"""
