"""
Checksum calculator: one value, every algorithm.

Runs all algorithms regardless of any selected format, flagging the ones whose
input domain the value falls outside of.
"""

import re
from dataclasses import dataclass

from barcodestudio.barcode.checksums import check_character
from barcodestudio.barcode.validator import is_blank
from barcodestudio.models.formats import ChecksumKind
from barcodestudio.models.results import ChecksumResult

_NUMERIC = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class CalculatorRow:
    """How one calculator row derives its check from the input."""

    name: str
    kind: ChecksumKind
    numeric_only: bool = False
    uppercase: bool = False
    prefix_length: int | None = None  # minimum length, and the prefix kept


CALCULATOR_ROWS: tuple[CalculatorRow, ...] = (
    CalculatorRow("Luhn (Mod 10)", ChecksumKind.LUHN, numeric_only=True),
    CalculatorRow("Mod 10 Weight 2", ChecksumKind.MOD10_WEIGHT2, numeric_only=True),
    CalculatorRow("Mod 10 Weight 3", ChecksumKind.MOD10_WEIGHT3, numeric_only=True),
    CalculatorRow("Mod 11", ChecksumKind.MOD11, numeric_only=True),
    CalculatorRow("Mod 11-A", ChecksumKind.MOD11_A, numeric_only=True),
    CalculatorRow("Mod 11 PZN", ChecksumKind.MOD11_PZN, numeric_only=True),
    CalculatorRow("Modulo 43 (CODE 39)", ChecksumKind.MOD43, uppercase=True),
    CalculatorRow("Modulo 16 (Codabar)", ChecksumKind.MOD16),
    CalculatorRow("Japan NW-7", ChecksumKind.JAPAN_NW7),
    CalculatorRow("JRC", ChecksumKind.JRC, numeric_only=True),
    CalculatorRow("7 Check DR", ChecksumKind.SEVEN_CHECK_DR, numeric_only=True),
    CalculatorRow("Mod 16 Japan", ChecksumKind.MOD16_JAPAN),
    CalculatorRow("EAN-13", ChecksumKind.EAN13, numeric_only=True, prefix_length=12),
    CalculatorRow("UPC-A", ChecksumKind.UPC, numeric_only=True, prefix_length=11),
)


def calculate_row(row: CalculatorRow, text: str) -> ChecksumResult:
    """Evaluate a single calculator row for ``text``."""
    numeric = _NUMERIC.fullmatch(text) is not None
    applicable = numeric or not row.numeric_only
    if row.prefix_length is not None and len(text) < row.prefix_length:
        applicable = False

    if not applicable:
        return ChecksumResult(name=row.name, kind=row.kind)

    value = text.upper() if row.uppercase else text
    check = check_character(row.kind, value)
    base = value[: row.prefix_length] if row.prefix_length is not None else value
    return ChecksumResult(
        name=row.name,
        kind=row.kind,
        value=check,
        full_value=base + check,
        applicable=True,
    )


def calculate_all(text: str) -> list[ChecksumResult]:
    """
    Compute every calculator row for ``text``.

    Returns an empty list for blank input.
    """
    if is_blank(text):
        return []
    return [calculate_row(row, text) for row in CALCULATOR_ROWS]
