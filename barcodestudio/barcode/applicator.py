"""
Append check characters to user values.
"""

import structlog

from barcodestudio.barcode.checksums import check_character
from barcodestudio.barcode.registry import (
    is_checksum_applicable,
    resolve_checksum,
    resolve_format,
)
from barcodestudio.barcode.validator import is_blank
from barcodestudio.models.formats import BarcodeFormat, ChecksumKind

logger = structlog.get_logger(__name__)

# Interleaved symbologies encode digits in pairs
PAIRED_DIGIT_FORMATS = frozenset({BarcodeFormat.ITF, BarcodeFormat.ITF14})

# Kinds that only apply to a payload of exactly this length
LENGTH_GATED = {
    ChecksumKind.EAN13: 12,
    ChecksumKind.UPC: 11,
}


def pad_to_even(value: str, format: BarcodeFormat) -> str:
    """Prefix a ``'0'`` when a paired-digit format would end up with an odd length."""
    if format in PAIRED_DIGIT_FORMATS and len(value) % 2 != 0:
        return "0" + value
    return value


def apply_checksum(
    text: str,
    format: BarcodeFormat | str,
    checksum_type: ChecksumKind | str,
) -> str:
    """
    Return ``text`` with the check character for ``checksum_type`` appended.

    - ``none`` and blank text are returned unchanged.
    - ``ean13`` / ``upc`` only apply to 12 / 11 character input; other
      lengths come back unchanged rather than raising.
    - ``mod10`` on ITF and ITF-14 is padded with a leading ``'0'`` when the
      result would have an odd length.
    - A Modulo 11 result of 10 is appended as ``'X'``.

    Kinds not offered for the format are still computed.
    """
    fmt = resolve_format(format)
    kind = resolve_checksum(checksum_type)

    if kind == ChecksumKind.NONE or is_blank(text):
        return text

    required_length = LENGTH_GATED.get(kind)
    if required_length is not None and len(text) != required_length:
        logger.debug(
            "Checksum skipped for length",
            checksum=kind.value,
            length=len(text),
            required=required_length,
        )
        return text

    if not is_checksum_applicable(fmt, kind):
        logger.debug("Checksum not offered for format", checksum=kind.value, format=fmt.value)

    result = text + check_character(kind, text)
    if kind == ChecksumKind.MOD10:
        result = pad_to_even(result, fmt)
    return result
