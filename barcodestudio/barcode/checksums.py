"""
Check digit and check character algorithms.

Every function is pure and total. Numeric algorithms work on the ASCII digit
subsequence of their input (possibly empty); alphabet based algorithms
(Modulo 43, the Modulo 16 family and Japan NW-7) sum alphabet positions and
skip characters outside the alphabet. None of them look at the barcode
format: deciding which algorithm suits a format is the caller's job.
"""

import re
from collections.abc import Callable
from types import MappingProxyType

from barcodestudio.models.formats import ChecksumKind

MOD43_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-. $/+%"
CODABAR_ALPHABET = "0123456789-$:/.+"
NW7_ALPHABET = "0123456789-$:/.+ABCD"
MOD16_JAPAN_ALPHABET = "0123456789-$:/.+ABCDTN*E"

_NON_DIGITS = re.compile(r"[^0-9]")
_ALL_DIGITS = re.compile(r"[0-9]+")


def digits_of(text: str) -> list[int]:
    """Return the ASCII digits of ``text`` as integers, other characters dropped."""
    return [int(c) for c in _NON_DIGITS.sub("", text)]


def digital_root(n: int) -> int:
    """Repeatedly sum decimal digits until a single digit remains."""
    while n > 9:
        n = sum(int(c) for c in str(n))
    return n


def _alphabet_sum(text: str, alphabet: str) -> int:
    return sum(alphabet.index(c) for c in text if c in alphabet)


def _mod10_complement(total: int) -> int:
    return (10 - (total % 10)) % 10


def calculate_mod10(text: str) -> int:
    """
    Calculate a Modulo 10 check digit (standard Luhn generation).

    Algorithm:
    1. Walk the digits right to left
    2. Double every second digit starting with the rightmost; subtract 9 above 9
    3. Checksum = (10 - (sum mod 10)) mod 10
    """
    total = 0
    double = True
    for digit in reversed(digits_of(text)):
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        double = not double
    return _mod10_complement(total)


def calculate_mod11(text: str) -> int:
    """
    Calculate a Modulo 11 check value in the range 0-10.

    Digits are weighted 2, 3, 4, 5, 6, 7 (cycling) from the right. A result of
    10 is written as ``'X'`` by callers.
    """
    weights = (2, 3, 4, 5, 6, 7)
    digits = digits_of(text)[::-1]
    total = sum(d * weights[i % len(weights)] for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder == 0 else 11 - remainder


def calculate_mod43_checksum(text: str) -> str:
    """Calculate the CODE 39 Modulo 43 check character."""
    return MOD43_ALPHABET[_alphabet_sum(text.upper(), MOD43_ALPHABET) % 43]


def calculate_mod16_checksum(text: str) -> str:
    """Calculate the Codabar Modulo 16 check character."""
    return CODABAR_ALPHABET[_alphabet_sum(text, CODABAR_ALPHABET) % 16]


def calculate_japan_nw7_checksum(text: str) -> str:
    """
    Calculate the Japan NW-7 check character for Codabar.

    Start/stop letters A-D count as positions 16-19; the check is the
    complement of the sum modulo 16.
    """
    total = _alphabet_sum(text.upper(), NW7_ALPHABET)
    return NW7_ALPHABET[(16 - (total % 16)) % 16]


def calculate_jrc_checksum(text: str) -> str:
    """Calculate the JRC (Japanese railway) check digit: weights 1, 2 from the left."""
    total = sum(d * (1 if i % 2 == 0 else 2) for i, d in enumerate(digits_of(text)))
    return str(_mod10_complement(total))


def calculate_luhn_checksum(text: str) -> str:
    """
    Calculate the Luhn variant used by the Codabar checksum list.

    Doubling happens where ``(length - i) % 2 == 0``, i.e. starting with the
    second digit from the right. This is the Luhn *validation* parity, so for
    a payload ``p`` the result equals ``calculate_mod10(p)`` only when computed
    over ``p + "0"``.
    """
    digits = digits_of(text)
    length = len(digits)
    total = 0
    for i in range(length - 1, -1, -1):
        digit = digits[i]
        if (length - i) % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return str(_mod10_complement(total))


def calculate_mod11_pzn_checksum(text: str) -> str:
    """
    Calculate the Modulo 11 PZN (Pharmazentralnummer) check digit.

    Digit n (1-indexed from the left) is weighted n. A remainder of 10 is
    written as ``'0'``.
    """
    total = sum(d * (i + 1) for i, d in enumerate(digits_of(text)))
    check = total % 11
    return "0" if check == 10 else str(check)


def calculate_mod11a_checksum(text: str) -> str:
    """Calculate the Modulo 11-A check character: weights 2, 3, 4, ... from the right."""
    digits = digits_of(text)[::-1]
    total = sum(d * (i + 2) for i, d in enumerate(digits))
    remainder = total % 11
    check = 0 if remainder == 0 else 11 - remainder
    return "X" if check == 10 else str(check)


def calculate_mod10_weight2_checksum(text: str) -> str:
    """Modulo 10 with weights 1, 2 from the left; products above 9 lose 9."""
    total = 0
    for i, digit in enumerate(digits_of(text)):
        weighted = digit * (1 if i % 2 == 0 else 2)
        if weighted > 9:
            weighted -= 9
        total += weighted
    return str(_mod10_complement(total))


def calculate_mod10_weight3_checksum(text: str) -> str:
    """Modulo 10 with weights 1, 3 from the left."""
    total = sum(d * (1 if i % 2 == 0 else 3) for i, d in enumerate(digits_of(text)))
    return str(_mod10_complement(total))


def calculate_7check_dr_checksum(text: str) -> str:
    """
    Calculate the 7 Check DR digit.

    Algorithm:
    1. Sum all digits
    2. Reduce the sum to its digital root
    3. Checksum = (7 - (root mod 7)) mod 7
    """
    root = digital_root(sum(digits_of(text)))
    return str((7 - (root % 7)) % 7)


def calculate_mod16_japan_checksum(text: str) -> str:
    """Calculate the Japanese Modulo 16 variant over the extended Codabar alphabet."""
    return MOD16_JAPAN_ALPHABET[_alphabet_sum(text.upper(), MOD16_JAPAN_ALPHABET) % 16]


def calculate_ean13_checksum(code: str) -> int:
    """
    Calculate EAN-13 checksum digit.

    Algorithm:
    1. Take the first 12 digits
    2. Multiply digits at odd positions (1, 3, 5, ...) by 1
    3. Multiply digits at even positions (2, 4, 6, ...) by 3
    4. Checksum = (10 - (sum mod 10)) mod 10

    Shorter inputs are summed over the digits present.
    """
    digits = digits_of(code)[:12]
    total = sum(d * (1 if i % 2 == 0 else 3) for i, d in enumerate(digits))
    return _mod10_complement(total)


def calculate_ean8_checksum(code: str) -> int:
    """
    Calculate EAN-8 checksum digit.

    Same scheme as EAN-13 over 7 digits, but positions 1, 3, 5, 7 weigh 3.
    """
    digits = digits_of(code)[:7]
    total = sum(d * (3 if i % 2 == 0 else 1) for i, d in enumerate(digits))
    return _mod10_complement(total)


def calculate_upc_checksum(code: str) -> int:
    """
    Calculate UPC-A checksum digit.

    Over the first 11 digits: three times the sum of odd positions
    (0-indexed even) plus the sum of even positions.
    """
    digits = digits_of(code)[:11]
    odd_sum = sum(digits[0::2])
    even_sum = sum(digits[1::2])
    return _mod10_complement(odd_sum * 3 + even_sum)


def _is_numeric(code: str) -> bool:
    return _ALL_DIGITS.fullmatch(code) is not None


def validate_ean13_checksum(code: str) -> bool:
    """
    Validate EAN-13 checksum.

    Args:
        code: 13-digit EAN code

    Returns:
        True if checksum is valid
    """
    if len(code) != 13 or not _is_numeric(code):
        return False
    return calculate_ean13_checksum(code) == int(code[-1])


def validate_ean8_checksum(code: str) -> bool:
    """Validate an 8-digit EAN-8 code."""
    if len(code) != 8 or not _is_numeric(code):
        return False
    return calculate_ean8_checksum(code) == int(code[-1])


def validate_upc_checksum(code: str) -> bool:
    """Validate a 12-digit UPC-A code."""
    if len(code) != 12 or not _is_numeric(code):
        return False
    return calculate_upc_checksum(code) == int(code[-1])


def _mod11_character(text: str) -> str:
    check = calculate_mod11(text)
    return "X" if check == 10 else str(check)


CHECK_CHARACTER_FUNCTIONS: MappingProxyType[ChecksumKind, Callable[[str], str]] = MappingProxyType(
    {
        ChecksumKind.NONE: lambda text: "",
        ChecksumKind.MOD10: lambda text: str(calculate_mod10(text)),
        ChecksumKind.MOD11: _mod11_character,
        ChecksumKind.MOD43: calculate_mod43_checksum,
        ChecksumKind.MOD16: calculate_mod16_checksum,
        ChecksumKind.JAPAN_NW7: calculate_japan_nw7_checksum,
        ChecksumKind.JRC: calculate_jrc_checksum,
        ChecksumKind.LUHN: calculate_luhn_checksum,
        ChecksumKind.MOD11_PZN: calculate_mod11_pzn_checksum,
        ChecksumKind.MOD11_A: calculate_mod11a_checksum,
        ChecksumKind.MOD10_WEIGHT2: calculate_mod10_weight2_checksum,
        ChecksumKind.MOD10_WEIGHT3: calculate_mod10_weight3_checksum,
        ChecksumKind.SEVEN_CHECK_DR: calculate_7check_dr_checksum,
        ChecksumKind.MOD16_JAPAN: calculate_mod16_japan_checksum,
        ChecksumKind.EAN13: lambda text: str(calculate_ean13_checksum(text)),
        ChecksumKind.UPC: lambda text: str(calculate_upc_checksum(text)),
    }
)


def check_character(kind: ChecksumKind, text: str) -> str:
    """
    Return the check character ``kind`` appends to ``text``.

    Numeric results are rendered as strings; a Modulo 11 result of 10 is ``'X'``.
    """
    return CHECK_CHARACTER_FUNCTIONS[kind](text)
