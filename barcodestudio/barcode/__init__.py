"""
Barcode rule engine: checksums, format registry, validation and encoding.
"""

from barcodestudio.barcode.applicator import apply_checksum
from barcodestudio.barcode.calculator import calculate_all
from barcodestudio.barcode.errors import (
    BarcodeError,
    InvalidInputError,
    UnknownChecksumError,
    UnknownFormatError,
)
from barcodestudio.barcode.normalizer import normalize_for_rendering
from barcodestudio.barcode.pipeline import (
    encoded_value,
    generate_random_values,
    parse_value_list,
    prepare,
    prepare_batch,
    prepare_config,
)
from barcodestudio.barcode.registry import (
    applicable_checksums,
    checksum_options,
    get_descriptor,
    is_two_dimensional,
    list_formats,
)
from barcodestudio.barcode.validator import is_valid, validate

__all__ = [
    "applicable_checksums",
    "checksum_options",
    "get_descriptor",
    "is_two_dimensional",
    "list_formats",
    "validate",
    "is_valid",
    "apply_checksum",
    "normalize_for_rendering",
    "calculate_all",
    "encoded_value",
    "prepare",
    "prepare_config",
    "prepare_batch",
    "parse_value_list",
    "generate_random_values",
    "BarcodeError",
    "InvalidInputError",
    "UnknownChecksumError",
    "UnknownFormatError",
]
