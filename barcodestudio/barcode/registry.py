"""
Static format registry and checksum applicability rules.

The tables are built once at import and exposed read-only.
"""

from types import MappingProxyType

from barcodestudio.barcode.errors import UnknownChecksumError, UnknownFormatError
from barcodestudio.models.formats import (
    BarcodeFormat,
    ChecksumKind,
    ChecksumOption,
    FormatCategory,
    FormatDescriptor,
)

_1D = FormatCategory.ONE_D
_2D = FormatCategory.TWO_D
_DIGITS_ONLY = "0-9 only"
_ANY_LENGTH = "Any length"

# 1D formats first, then 2D
_DESCRIPTORS = (
    FormatDescriptor(
        format=BarcodeFormat.CODE39,
        label="CODE 39",
        category=_1D,
        description="Alphanumeric, widely used in industrial applications",
        valid_chars="A-Z, 0-9, -, ., $, /, +, %, SPACE",
        length_hint=_ANY_LENGTH,
    ),
    FormatDescriptor(
        format=BarcodeFormat.CODE93,
        label="CODE 93",
        category=_1D,
        description="Higher density than CODE 39, full ASCII support",
        valid_chars="All ASCII characters",
        length_hint=_ANY_LENGTH,
    ),
    FormatDescriptor(
        format=BarcodeFormat.CODE128,
        label="CODE 128",
        category=_1D,
        description="High-density, supports full ASCII",
        valid_chars="All ASCII characters (0-127)",
        length_hint=_ANY_LENGTH,
    ),
    FormatDescriptor(
        format=BarcodeFormat.EAN13,
        label="EAN-13",
        category=_1D,
        description="European Article Number, retail products",
        valid_chars=_DIGITS_ONLY,
        length_hint="12 or 13 digits",
    ),
    FormatDescriptor(
        format=BarcodeFormat.EAN8,
        label="EAN-8",
        category=_1D,
        description="Short version of EAN-13",
        valid_chars=_DIGITS_ONLY,
        length_hint="7 or 8 digits",
    ),
    FormatDescriptor(
        format=BarcodeFormat.EAN5,
        label="EAN-5",
        category=_1D,
        description="UPC/EAN supplemental 5-digit add-on",
        valid_chars=_DIGITS_ONLY,
        length_hint="Exactly 5 digits",
    ),
    FormatDescriptor(
        format=BarcodeFormat.EAN2,
        label="EAN-2",
        category=_1D,
        description="UPC/EAN supplemental 2-digit add-on",
        valid_chars=_DIGITS_ONLY,
        length_hint="Exactly 2 digits",
    ),
    FormatDescriptor(
        format=BarcodeFormat.UPC,
        label="UPC-A",
        category=_1D,
        description="Universal Product Code, US retail",
        valid_chars=_DIGITS_ONLY,
        length_hint="11 or 12 digits",
    ),
    FormatDescriptor(
        format=BarcodeFormat.UPCE,
        label="UPC-E",
        category=_1D,
        description="Compressed UPC for small packages",
        valid_chars=_DIGITS_ONLY,
        length_hint="6, 7, or 8 digits",
    ),
    FormatDescriptor(
        format=BarcodeFormat.ITF14,
        label="ITF-14",
        category=_1D,
        description="Interleaved 2 of 5, shipping containers",
        valid_chars=_DIGITS_ONLY,
        length_hint="13 or 14 digits",
    ),
    FormatDescriptor(
        format=BarcodeFormat.ITF,
        label="ITF",
        category=_1D,
        description="Interleaved 2 of 5",
        valid_chars=_DIGITS_ONLY,
        length_hint="Even number of digits",
    ),
    FormatDescriptor(
        format=BarcodeFormat.MSI,
        label="MSI",
        category=_1D,
        description="Modified Plessey, inventory control",
        valid_chars=_DIGITS_ONLY,
        length_hint=_ANY_LENGTH,
    ),
    FormatDescriptor(
        format=BarcodeFormat.MSI10,
        label="MSI Mod 10",
        category=_1D,
        description="MSI with Mod 10 check digit",
        valid_chars=_DIGITS_ONLY,
        length_hint=_ANY_LENGTH,
    ),
    FormatDescriptor(
        format=BarcodeFormat.MSI11,
        label="MSI Mod 11",
        category=_1D,
        description="MSI with Mod 11 check digit",
        valid_chars=_DIGITS_ONLY,
        length_hint=_ANY_LENGTH,
    ),
    FormatDescriptor(
        format=BarcodeFormat.MSI1010,
        label="MSI Mod 10 Mod 10",
        category=_1D,
        description="MSI with two Mod 10 check digits",
        valid_chars=_DIGITS_ONLY,
        length_hint=_ANY_LENGTH,
    ),
    FormatDescriptor(
        format=BarcodeFormat.MSI1110,
        label="MSI Mod 11 Mod 10",
        category=_1D,
        description="MSI with Mod 11 and Mod 10 check digits",
        valid_chars=_DIGITS_ONLY,
        length_hint=_ANY_LENGTH,
    ),
    FormatDescriptor(
        format=BarcodeFormat.PHARMACODE,
        label="Pharmacode",
        category=_1D,
        description="Pharmaceutical packaging",
        valid_chars=_DIGITS_ONLY,
        length_hint="Number 3-131070",
    ),
    FormatDescriptor(
        format=BarcodeFormat.CODABAR,
        label="Codabar",
        category=_1D,
        description="Libraries, blood banks, shipping",
        valid_chars="0-9, -, $, :, /, ., +",
        length_hint=_ANY_LENGTH,
    ),
    FormatDescriptor(
        format=BarcodeFormat.QRCODE,
        label="QR Code",
        category=_2D,
        description="Quick Response code, widely used for URLs and data",
        valid_chars="All characters",
        length_hint="Up to 4,296 chars",
    ),
    FormatDescriptor(
        format=BarcodeFormat.AZTECCODE,
        label="Aztec Code",
        category=_2D,
        description="High-density 2D barcode, used in transport tickets",
        valid_chars="All ASCII characters",
        length_hint="Up to 3,832 chars",
    ),
    FormatDescriptor(
        format=BarcodeFormat.DATAMATRIX,
        label="Data Matrix",
        category=_2D,
        description="2D matrix barcode for small items",
        valid_chars="All ASCII characters",
        length_hint="Up to 2,335 chars",
    ),
    FormatDescriptor(
        format=BarcodeFormat.PDF417,
        label="PDF417",
        category=_2D,
        description="Stacked linear barcode, used in IDs and shipping",
        valid_chars="All ASCII characters",
        length_hint="Up to 1,850 chars",
    ),
)

FORMATS: MappingProxyType[BarcodeFormat, FormatDescriptor] = MappingProxyType(
    {d.format: d for d in _DESCRIPTORS}
)

CHECKSUM_LABELS: MappingProxyType[ChecksumKind, str] = MappingProxyType(
    {
        ChecksumKind.NONE: "None",
        ChecksumKind.MOD10: "Modulo 10",
        ChecksumKind.MOD11: "Modulo 11",
        ChecksumKind.MOD43: "Modulo 43",
        ChecksumKind.MOD16: "Modulo 16",
        ChecksumKind.JAPAN_NW7: "Japan NW-7",
        ChecksumKind.JRC: "JRC",
        ChecksumKind.LUHN: "Luhn",
        ChecksumKind.MOD11_PZN: "Modulo 11 PZN",
        ChecksumKind.MOD11_A: "Modulo 11-A",
        ChecksumKind.MOD10_WEIGHT2: "Modulo 10 Weight 2",
        ChecksumKind.MOD10_WEIGHT3: "Modulo 10 Weight 3",
        ChecksumKind.SEVEN_CHECK_DR: "7 Check DR",
        ChecksumKind.MOD16_JAPAN: "Modulo 16 Japan",
        ChecksumKind.EAN13: "EAN-13 Check",
        ChecksumKind.UPC: "UPC-A Modulo 10",
    }
)

_ITF_MOD10_LABEL = "Modulo 10 (auto-pads for even length)"

_CODABAR_CHECKSUMS = (
    ChecksumKind.MOD16,
    ChecksumKind.JAPAN_NW7,
    ChecksumKind.JRC,
    ChecksumKind.LUHN,
    ChecksumKind.MOD11_PZN,
    ChecksumKind.MOD11_A,
    ChecksumKind.MOD10_WEIGHT2,
    ChecksumKind.MOD10_WEIGHT3,
    ChecksumKind.SEVEN_CHECK_DR,
    ChecksumKind.MOD16_JAPAN,
)

# Formats missing here accept only ChecksumKind.NONE
_APPLICABLE: dict[BarcodeFormat, tuple[ChecksumKind, ...]] = {
    BarcodeFormat.CODE39: (ChecksumKind.MOD43,),
    BarcodeFormat.CODABAR: _CODABAR_CHECKSUMS,
    BarcodeFormat.EAN13: (ChecksumKind.EAN13,),
    BarcodeFormat.UPC: (ChecksumKind.UPC,),
    BarcodeFormat.ITF: (ChecksumKind.MOD10,),
    BarcodeFormat.ITF14: (ChecksumKind.MOD10,),
    BarcodeFormat.MSI: (ChecksumKind.MOD10, ChecksumKind.MOD11),
    BarcodeFormat.CODE128: (ChecksumKind.MOD10,),
}

APPLICABLE_CHECKSUMS: MappingProxyType[BarcodeFormat, tuple[ChecksumKind, ...]] = (
    MappingProxyType(
        {fmt: (ChecksumKind.NONE, *_APPLICABLE.get(fmt, ())) for fmt in FORMATS}
    )
)


def resolve_format(value: BarcodeFormat | str) -> BarcodeFormat:
    """
    Coerce a format identifier to ``BarcodeFormat``.

    Raises:
        UnknownFormatError: identifier is not registered
    """
    try:
        fmt = BarcodeFormat(value)
    except ValueError:
        raise UnknownFormatError(value) from None
    if fmt not in FORMATS:
        raise UnknownFormatError(value)
    return fmt


def resolve_checksum(value: ChecksumKind | str) -> ChecksumKind:
    """
    Coerce a checksum identifier to ``ChecksumKind``.

    Raises:
        UnknownChecksumError: identifier is not a known algorithm
    """
    try:
        return ChecksumKind(value)
    except ValueError:
        raise UnknownChecksumError(value) from None


def list_formats(category: FormatCategory | None = None) -> tuple[FormatDescriptor, ...]:
    """All format descriptors in display order, optionally for one category."""
    if category is None:
        return _DESCRIPTORS
    return tuple(d for d in _DESCRIPTORS if d.category == category)


def get_descriptor(format: BarcodeFormat | str) -> FormatDescriptor:
    return FORMATS[resolve_format(format)]


def is_two_dimensional(format: BarcodeFormat | str) -> bool:
    return get_descriptor(format).is_two_dimensional


def applicable_checksums(format: BarcodeFormat | str) -> tuple[ChecksumKind, ...]:
    """Checksum kinds offered for ``format``; always starts with ``none``."""
    return APPLICABLE_CHECKSUMS[resolve_format(format)]


def is_checksum_applicable(format: BarcodeFormat | str, kind: ChecksumKind | str) -> bool:
    return resolve_checksum(kind) in applicable_checksums(format)


def checksum_options(format: BarcodeFormat | str) -> tuple[ChecksumOption, ...]:
    """Applicable checksums with their display labels."""
    fmt = resolve_format(format)
    options = []
    for kind in APPLICABLE_CHECKSUMS[fmt]:
        label = CHECKSUM_LABELS[kind]
        if kind == ChecksumKind.MOD10 and fmt in (BarcodeFormat.ITF, BarcodeFormat.ITF14):
            label = _ITF_MOD10_LABEL
        options.append(ChecksumOption(kind=kind, label=label))
    return tuple(options)
