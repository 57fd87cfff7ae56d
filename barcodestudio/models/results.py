"""
Result models produced by validation, checksum fan-out and batch preparation.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from barcodestudio.models.formats import ChecksumKind

NOT_APPLICABLE = "-"


class ValidationFailure(str, Enum):
    """Why a value was rejected."""

    EMPTY_INPUT = "empty_input"
    FORMAT_CONSTRAINT_VIOLATION = "format_constraint_violation"


class ValidationResult(BaseModel):
    """
    Outcome of validating a value against a format.

    Computed fresh for every edit; never cached.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    message: str = ""
    failure: ValidationFailure | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str, failure: ValidationFailure) -> "ValidationResult":
        return cls(valid=False, message=message, failure=failure)


class ChecksumResult(BaseModel):
    """One row of the checksum calculator."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ChecksumKind
    value: str = Field(NOT_APPLICABLE, description="Check character, '-' when not applicable")
    full_value: str = Field(NOT_APPLICABLE, description="Input with check appended")
    applicable: bool = False


class BatchEntry(BaseModel):
    """Preparation outcome for one value of a batch."""

    model_config = ConfigDict(frozen=True)

    value: str
    valid: bool
    message: str = ""
    encoded: str | None = Field(None, description="Value with checksum applied")
    render_value: str | None = Field(None, description="Encoded value as handed to the renderer")
