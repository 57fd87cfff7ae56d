"""
Per-format input validation, run before any checksum or rendering step.
"""

import re

from barcodestudio.barcode.registry import resolve_format
from barcodestudio.models.formats import BarcodeFormat
from barcodestudio.models.results import ValidationFailure, ValidationResult

EMPTY_MESSAGE = "Please enter a value"

PHARMACODE_MIN = 3
PHARMACODE_MAX = 131070

# Whitespace as browsers trim it: no \x1c-\x1f or \x85, but the BOM counts
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_BLANK = re.compile(f"[{WHITESPACE}]*")
_SURROUNDING_SPACE = re.compile(f"\\A[{WHITESPACE}]+|[{WHITESPACE}]+\\Z")
_CODE39 = re.compile(f"[A-Za-z0-9\\-.{WHITESPACE}$/+%]+")
_DIGITS = re.compile(r"[0-9]+")
_LEADING_INT = re.compile(f"[{WHITESPACE}]*([+-]?)0*([0-9]+)")

# Formats checked by a whole-value pattern: (pattern, failure message)
_PATTERN_RULES: dict[BarcodeFormat, tuple[re.Pattern[str], str]] = {
    BarcodeFormat.CODE39: (
        _CODE39,
        "CODE 39 only supports A-Z, 0-9, -, ., $, /, +, %, and space",
    ),
    BarcodeFormat.EAN13: (re.compile(r"[0-9]{12,13}"), "EAN-13 requires exactly 12 or 13 digits"),
    BarcodeFormat.EAN8: (re.compile(r"[0-9]{7,8}"), "EAN-8 requires exactly 7 or 8 digits"),
    BarcodeFormat.EAN5: (re.compile(r"[0-9]{5}"), "EAN-5 requires exactly 5 digits"),
    BarcodeFormat.EAN2: (re.compile(r"[0-9]{2}"), "EAN-2 requires exactly 2 digits"),
    BarcodeFormat.UPC: (re.compile(r"[0-9]{11,12}"), "UPC-A requires exactly 11 or 12 digits"),
    BarcodeFormat.UPCE: (re.compile(r"[0-9]{6,8}"), "UPC-E requires 6, 7, or 8 digits"),
    BarcodeFormat.ITF14: (re.compile(r"[0-9]{13,14}"), "ITF-14 requires exactly 13 or 14 digits"),
}

_MSI_FORMATS = frozenset(
    {
        BarcodeFormat.MSI,
        BarcodeFormat.MSI10,
        BarcodeFormat.MSI11,
        BarcodeFormat.MSI1010,
        BarcodeFormat.MSI1110,
    }
)


def is_blank(text: str) -> bool:
    """True when the text is empty or whitespace only."""
    return _BLANK.fullmatch(text) is not None


def trim(text: str) -> str:
    """Strip surrounding whitespace."""
    return _SURROUNDING_SPACE.sub("", text)


def parse_leading_int(text: str, max_digits: int = len(str(PHARMACODE_MAX))) -> int | None:
    """
    Parse an integer the lenient way: leading whitespace, optional sign, digits.

    Anything after the digits is ignored and leading zeros do not count.
    Returns None when no digits lead or when more than ``max_digits``
    significant digits remain, so arbitrarily long input never reaches int().
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    sign, digits = match.groups()
    if len(digits) > max_digits:
        return None
    return int(sign + digits)


def _violation(message: str) -> ValidationResult:
    return ValidationResult.fail(message, ValidationFailure.FORMAT_CONSTRAINT_VIOLATION)


def validate(text: str, format: BarcodeFormat | str) -> ValidationResult:
    """
    Validate a value for a barcode format.

    Args:
        text: Raw user input
        format: Target barcode format

    Returns:
        ValidationResult with the user-facing message on failure

    Raises:
        UnknownFormatError: format is not registered
    """
    fmt = resolve_format(format)

    if is_blank(text):
        return ValidationResult.fail(EMPTY_MESSAGE, ValidationFailure.EMPTY_INPUT)

    rule = _PATTERN_RULES.get(fmt)
    if rule is not None:
        pattern, message = rule
        if pattern.fullmatch(text) is None:
            return _violation(message)
        return ValidationResult.ok()

    if fmt == BarcodeFormat.ITF:
        if _DIGITS.fullmatch(text) is None or len(text) % 2 != 0:
            return _violation("ITF requires an even number of digits")

    elif fmt == BarcodeFormat.PHARMACODE:
        number = parse_leading_int(text)
        if number is None or not PHARMACODE_MIN <= number <= PHARMACODE_MAX:
            return _violation(
                f"Pharmacode requires a number between {PHARMACODE_MIN} and {PHARMACODE_MAX}"
            )

    elif fmt in _MSI_FORMATS:
        if _DIGITS.fullmatch(text) is None:
            return _violation("MSI formats only support digits")

    # CODE93, CODE128, codabar and the 2D formats accept any non-empty text
    return ValidationResult.ok()


def is_valid(text: str, format: BarcodeFormat | str) -> bool:
    """Boolean shorthand for ``validate(text, format).valid``."""
    return validate(text, format).valid
