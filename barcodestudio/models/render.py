"""
Payload handed to the external symbology renderer.
"""

import re

from pydantic import BaseModel, ConfigDict, Field

from barcodestudio.models.config import QualityLevel
from barcodestudio.models.formats import BarcodeFormat

FILENAME_TEXT_LIMIT = 64

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class RenderRequest(BaseModel):
    """
    Validated, checksum-applied and normalized value plus style options.

    Dimensions are already multiplied by the config scale.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Value exactly as the renderer should encode it")
    encoded: str = Field(..., description="Value with checksum applied, before normalization")
    format: BarcodeFormat
    two_dimensional: bool = False

    width: float = 2
    height: float = 100
    font_size: float = 16
    margin: float = 10
    display_value: bool = True
    line_color: str = "#000000"
    background: str = "#FFFFFF"

    quality: QualityLevel = QualityLevel.A
    blur: float = Field(0.0, ge=0.0, description="Blur radius for the quality simulation")

    @property
    def filename(self) -> str:
        """
        Suggested PNG file name for a single export.

        Characters outside ``A-Za-z0-9._-`` become ``_`` and the value part is
        capped at ``FILENAME_TEXT_LIMIT`` characters.
        """
        safe = _UNSAFE_FILENAME_CHARS.sub("_", self.text)[:FILENAME_TEXT_LIMIT]
        return f"barcode-{self.format.value}-{safe}.png"
