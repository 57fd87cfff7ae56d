"""
Validate -> apply checksum -> normalize, producing renderer hand-off payloads.

Each value is processed independently; batches share no state and can be
split across workers freely.
"""

import random
import string
from collections.abc import Iterable

import structlog

from barcodestudio.barcode.applicator import apply_checksum
from barcodestudio.barcode.errors import InvalidInputError
from barcodestudio.barcode.normalizer import normalize_for_rendering
from barcodestudio.barcode.registry import (
    get_descriptor,
    resolve_checksum,
    resolve_format,
)
from barcodestudio.barcode.validator import PHARMACODE_MAX, PHARMACODE_MIN, trim, validate
from barcodestudio.models import (
    QUALITY_PRESETS,
    BarcodeConfig,
    BarcodeFormat,
    BatchEntry,
    ChecksumKind,
    RenderRequest,
)

logger = structlog.get_logger(__name__)

NUMERIC_CHARS = string.digits
ALPHANUMERIC_CHARS = string.digits + string.ascii_uppercase

# Random batch values use the payload length before the check digit
FIXED_RANDOM_LENGTHS = {
    BarcodeFormat.EAN13: 12,
    BarcodeFormat.EAN8: 7,
    BarcodeFormat.EAN5: 5,
    BarcodeFormat.EAN2: 2,
    BarcodeFormat.UPC: 11,
    BarcodeFormat.UPCE: 7,
    BarcodeFormat.ITF14: 13,
}


def encoded_value(config: BarcodeConfig) -> str:
    """Derive the checksum-applied value of a config. Never cached."""
    return apply_checksum(config.text, config.format, config.checksum_type)


def prepare(
    text: str,
    format: BarcodeFormat | str,
    checksum_type: ChecksumKind | str = ChecksumKind.NONE,
    config: BarcodeConfig | None = None,
) -> RenderRequest:
    """
    Build the renderer payload for one value.

    Args:
        text: Raw user input
        format: Target barcode format
        checksum_type: Check character to append
        config: Style source; defaults are used when omitted

    Returns:
        RenderRequest with scaled dimensions

    Raises:
        InvalidInputError: value fails validation for the format
        UnknownFormatError: format is not registered
    """
    fmt = resolve_format(format)
    kind = resolve_checksum(checksum_type)

    result = validate(text, fmt)
    if not result.valid:
        raise InvalidInputError(result)

    encoded = apply_checksum(text, fmt, kind)
    render_text = normalize_for_rendering(encoded, fmt)

    style = config if config is not None else BarcodeConfig()
    scale = style.scale
    return RenderRequest(
        text=render_text,
        encoded=encoded,
        format=fmt,
        two_dimensional=get_descriptor(fmt).is_two_dimensional,
        width=style.width * scale,
        height=style.height * scale,
        font_size=style.font_size * scale,
        margin=style.margin * scale,
        display_value=style.display_value,
        line_color=style.line_color,
        background=style.background,
        quality=style.quality,
        blur=QUALITY_PRESETS[style.quality].blur,
    )


def prepare_config(config: BarcodeConfig) -> RenderRequest:
    """Build the renderer payload for the session config."""
    return prepare(config.text, config.format, config.checksum_type, config)


def parse_value_list(raw: str) -> list[str]:
    """Split newline separated input into stripped, non-empty values."""
    values = (trim(line) for line in raw.split("\n"))
    return [value for value in values if value]


def prepare_entry(
    value: str,
    format: BarcodeFormat | str,
    checksum_type: ChecksumKind | str = ChecksumKind.NONE,
) -> BatchEntry:
    """Prepare one batch value, reporting invalid input instead of raising."""
    result = validate(value, format)
    if not result.valid:
        return BatchEntry(value=value, valid=False, message=result.message)

    encoded = apply_checksum(value, format, checksum_type)
    return BatchEntry(
        value=value,
        valid=True,
        encoded=encoded,
        render_value=normalize_for_rendering(encoded, format),
    )


def prepare_batch(
    values: Iterable[str],
    format: BarcodeFormat | str,
    checksum_type: ChecksumKind | str = ChecksumKind.NONE,
) -> list[BatchEntry]:
    """
    Prepare many values for the same format and checksum.

    Invalid values are kept in the output with their validation message so the
    batch never stops early.
    """
    fmt = resolve_format(format)
    kind = resolve_checksum(checksum_type)

    entries = [prepare_entry(value, fmt, kind) for value in values]
    invalid = sum(1 for e in entries if not e.valid)

    logger.info(
        "Batch prepared",
        format=fmt.value,
        checksum=kind.value,
        total=len(entries),
        invalid=invalid,
    )
    return entries


def _is_numeric_format(fmt: BarcodeFormat) -> bool:
    return get_descriptor(fmt).valid_chars == "0-9 only"


def random_value_length(format: BarcodeFormat | str, length: int) -> int:
    """Length used for random values of ``format`` given a requested length."""
    fmt = resolve_format(format)
    if fmt in FIXED_RANDOM_LENGTHS:
        return FIXED_RANDOM_LENGTHS[fmt]
    if fmt == BarcodeFormat.ITF and length % 2 != 0:
        return max(2, length - 1)
    return length


def generate_random_values(
    format: BarcodeFormat | str,
    count: int,
    length: int,
    rng: random.Random | None = None,
) -> list[str]:
    """
    Generate random values suitable for ``format``.

    Numeric formats draw digits, others draw ``0-9A-Z``. Fixed-length formats
    ignore ``length``; pharmacode draws from its accepted number range.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if length < 1:
        raise ValueError("length must be at least 1")

    fmt = resolve_format(format)
    rng = rng or random.Random()

    if fmt == BarcodeFormat.PHARMACODE:
        return [str(rng.randint(PHARMACODE_MIN, PHARMACODE_MAX)) for _ in range(count)]

    chars = NUMERIC_CHARS if _is_numeric_format(fmt) else ALPHANUMERIC_CHARS
    size = random_value_length(fmt, length)
    return ["".join(rng.choice(chars) for _ in range(size)) for _ in range(count)]
