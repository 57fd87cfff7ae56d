"""
Adjust encoded values to what the external renderer accepts.

Runs after checksum application: check characters are computed on the value
the user meant, not on the renderer's representation of it.
"""

from barcodestudio.barcode.registry import resolve_format
from barcodestudio.barcode.validator import parse_leading_int
from barcodestudio.models.formats import BarcodeFormat

# Renderer alphabets for these have no lowercase letters
UPPERCASE_FORMATS = frozenset({BarcodeFormat.CODE39, BarcodeFormat.CODABAR})


def normalize_for_rendering(encoded: str, format: BarcodeFormat | str) -> str:
    """
    Prepare a checksum-applied value for the renderer.

    - CODE39, codabar: uppercased
    - pharmacode: canonical decimal of the leading integer (``" 0042"`` -> ``"42"``)
    - anything else: unchanged
    """
    fmt = resolve_format(format)

    if fmt in UPPERCASE_FORMATS:
        return encoded.upper()

    if fmt == BarcodeFormat.PHARMACODE:
        number = parse_leading_int(encoded)
        return encoded if number is None else str(number)

    return encoded
