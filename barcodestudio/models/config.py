"""
Session barcode configuration.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from barcodestudio.models.formats import BarcodeFormat, ChecksumKind

if TYPE_CHECKING:
    from barcodestudio.config.settings import Settings


class QualityLevel(str, Enum):
    """Print quality grade simulated on the rendered image."""

    A = "A"
    B = "B"
    C = "C"


class QualityPreset(NamedTuple):
    label: str
    description: str
    blur: float


QUALITY_PRESETS: dict[QualityLevel, QualityPreset] = {
    QualityLevel.A: QualityPreset("High (A)", "Crystal clear, sharp edges", 0.0),
    QualityLevel.B: QualityPreset("Medium (B)", "Slightly softened edges", 0.5),
    QualityLevel.C: QualityPreset("Low (C)", "Blurred, degraded appearance", 1.2),
}

# Fields restored by reset_dimensions()
DIMENSION_FIELDS = ("width", "height", "margin", "font_size", "scale")


class BarcodeConfig(BaseModel):
    """
    User-editable barcode settings for one session.

    Lives in memory only. The encoded value is never stored here; derive it
    with ``barcodestudio.barcode.pipeline.encoded_value`` so it cannot go stale.
    """

    model_config = ConfigDict(validate_assignment=True)

    format: BarcodeFormat = BarcodeFormat.CODE39
    text: str = "BARCODE123"
    checksum_type: ChecksumKind = ChecksumKind.NONE

    # Style
    display_value: bool = True
    width: float = Field(2, gt=0, description="Bar width in pixels")
    height: float = Field(100, gt=0, description="Bar height in pixels")
    margin: float = Field(10, ge=0)
    font_size: float = Field(16, gt=0)
    line_color: str = "#000000"
    background: str = "#FFFFFF"
    scale: float = Field(1, gt=0)
    quality: QualityLevel = QualityLevel.A

    @classmethod
    def from_settings(cls, settings: "Settings") -> "BarcodeConfig":
        """Create the session defaults from application settings."""
        return cls(
            format=settings.default_format,
            text=settings.default_text,
            scale=settings.default_scale,
        )

    def update(self, **changes: Any) -> None:
        """
        Apply user edits in place.

        Switching the format resets the checksum to ``none`` because
        applicability is format specific. A checksum passed in the same call
        is applied after the reset.

        The edits are validated together; when any of them is rejected the
        config is left exactly as it was.
        """
        fields = type(self).model_fields
        unknown = set(changes) - set(fields)
        if unknown:
            raise ValueError(f"Unknown config fields: {', '.join(sorted(unknown))}")

        checksum = changes.pop("checksum_type", None)
        state = self.model_dump()
        if "format" in changes:
            state["checksum_type"] = ChecksumKind.NONE
        state.update(changes)
        if checksum is not None:
            state["checksum_type"] = checksum

        candidate = type(self).model_validate(state)
        for name in fields:
            setattr(self, name, getattr(candidate, name))

    def reset_dimensions(self) -> None:
        """Restore bar width, height, margin, font size and scale to defaults."""
        fields = type(self).model_fields
        for name in DIMENSION_FIELDS:
            setattr(self, name, fields[name].default)

    @property
    def blur(self) -> float:
        return QUALITY_PRESETS[self.quality].blur
