"""
Pydantic models for barcode formats, session configuration and results.
"""

from barcodestudio.models.config import (
    QUALITY_PRESETS,
    BarcodeConfig,
    QualityLevel,
    QualityPreset,
)
from barcodestudio.models.formats import (
    BarcodeFormat,
    ChecksumKind,
    ChecksumOption,
    FormatCategory,
    FormatDescriptor,
)
from barcodestudio.models.render import RenderRequest
from barcodestudio.models.results import (
    NOT_APPLICABLE,
    BatchEntry,
    ChecksumResult,
    ValidationFailure,
    ValidationResult,
)

__all__ = [
    # Formats
    "BarcodeFormat",
    "ChecksumKind",
    "ChecksumOption",
    "FormatCategory",
    "FormatDescriptor",
    # Config
    "BarcodeConfig",
    "QualityLevel",
    "QualityPreset",
    "QUALITY_PRESETS",
    # Results
    "ValidationResult",
    "ValidationFailure",
    "ChecksumResult",
    "BatchEntry",
    "NOT_APPLICABLE",
    # Rendering
    "RenderRequest",
]
