"""
Barcode rule engine exceptions.
"""

from barcodestudio.models.results import ValidationResult


class BarcodeError(Exception):
    """Base class for barcodestudio errors."""


class UnknownFormatError(BarcodeError, ValueError):
    """Format identifier is not in the registry. A programming error."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown barcode format: {value!r}")


class UnknownChecksumError(BarcodeError, ValueError):
    """Checksum identifier is not a known algorithm."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown checksum type: {value!r}")


class InvalidInputError(BarcodeError):
    """Value failed format validation and must not be rendered."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(result.message)
