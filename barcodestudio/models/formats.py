"""
Barcode format and checksum identifiers.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BarcodeFormat(str, Enum):
    """Supported barcode symbologies, valued by their renderer identifiers."""

    # 1D
    CODE39 = "CODE39"
    CODE93 = "CODE93"
    CODE128 = "CODE128"
    EAN13 = "EAN13"
    EAN8 = "EAN8"
    EAN5 = "EAN5"
    EAN2 = "EAN2"
    UPC = "UPC"
    UPCE = "UPCE"
    ITF14 = "ITF14"
    ITF = "ITF"
    MSI = "MSI"
    MSI10 = "MSI10"
    MSI11 = "MSI11"
    MSI1010 = "MSI1010"
    MSI1110 = "MSI1110"
    PHARMACODE = "pharmacode"
    CODABAR = "codabar"
    # 2D
    QRCODE = "qrcode"
    AZTECCODE = "azteccode"
    DATAMATRIX = "datamatrix"
    PDF417 = "pdf417"


class FormatCategory(str, Enum):
    """Linear or matrix symbology."""

    ONE_D = "1D"
    TWO_D = "2D"


class ChecksumKind(str, Enum):
    """Check character algorithms that can be appended to a value."""

    NONE = "none"
    MOD10 = "mod10"
    MOD11 = "mod11"
    MOD43 = "mod43"
    MOD16 = "mod16"
    JAPAN_NW7 = "japanNW7"
    JRC = "jrc"
    LUHN = "luhn"
    MOD11_PZN = "mod11PZN"
    MOD11_A = "mod11A"
    MOD10_WEIGHT2 = "mod10Weight2"
    MOD10_WEIGHT3 = "mod10Weight3"
    SEVEN_CHECK_DR = "7CheckDR"
    MOD16_JAPAN = "mod16Japan"
    EAN13 = "ean13"
    UPC = "upc"


class FormatDescriptor(BaseModel):
    """Static metadata for one barcode format."""

    model_config = ConfigDict(frozen=True)

    format: BarcodeFormat
    label: str = Field(..., description="Human readable name, e.g. 'EAN-13'")
    category: FormatCategory
    description: str
    valid_chars: str = Field(..., description="Accepted symbols hint")
    length_hint: str = Field(..., description="Accepted length hint")

    @property
    def is_two_dimensional(self) -> bool:
        return self.category == FormatCategory.TWO_D


class ChecksumOption(BaseModel):
    """A checksum kind together with the label shown for it."""

    model_config = ConfigDict(frozen=True)

    kind: ChecksumKind
    label: str
