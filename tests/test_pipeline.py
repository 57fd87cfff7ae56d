"""
Tests for render preparation and batch helpers.
"""

import random

import pytest

from barcodestudio.barcode.errors import InvalidInputError, UnknownFormatError
from barcodestudio.barcode.pipeline import (
    encoded_value,
    generate_random_values,
    parse_value_list,
    prepare,
    prepare_batch,
    prepare_config,
    random_value_length,
)
from barcodestudio.barcode.validator import is_valid
from barcodestudio.models import BarcodeConfig, BarcodeFormat, ChecksumKind, QualityLevel


class TestEncodedValue:
    """The encoded value is derived from the config on every call."""

    def test_rederived_after_edits(self):
        """Every edit to text, format or checksum shows up in the next value."""
        config = BarcodeConfig(text="CODE39", checksum_type=ChecksumKind.MOD43)
        assert encoded_value(config) == "CODE39W"

        config.update(text="ABC")
        assert encoded_value(config) == "ABCX"

        config.update(format="EAN13", text="400638133393")
        assert encoded_value(config) == "400638133393"

        config.update(checksum_type="ean13")
        assert encoded_value(config) == "4006381333931"


class TestPrepare:
    """Tests for prepare and prepare_config."""

    def test_valid_value(self):
        """A valid value is checksummed, then normalized for the renderer."""
        request = prepare("code39", "CODE39", "mod43")
        assert request.encoded == "code39W"
        assert request.text == "CODE39W"
        assert request.format == BarcodeFormat.CODE39
        assert request.two_dimensional is False

    def test_invalid_value_raises(self):
        """Invalid input raises with the validation result attached."""
        with pytest.raises(InvalidInputError) as exc_info:
            prepare("ABC123", "EAN13", "ean13")
        assert exc_info.value.result.message == "EAN-13 requires exactly 12 or 13 digits"

    def test_empty_value_raises(self):
        """Empty input raises with the empty-value message."""
        with pytest.raises(InvalidInputError) as exc_info:
            prepare("", "qrcode")
        assert str(exc_info.value) == "Please enter a value"

    def test_unknown_format(self):
        """An unregistered format raises UnknownFormatError."""
        with pytest.raises(UnknownFormatError):
            prepare("123", "CODE11")

    def test_two_dimensional(self):
        """2D formats are flagged on the request."""
        assert prepare("https://example.com", "qrcode").two_dimensional

    def test_itf_padding_reaches_renderer(self):
        """ITF padding survives into the renderer text."""
        assert prepare("1234", "ITF", "mod10").text == "012344"

    def test_scaled_style(self):
        """Dimensions are multiplied by scale and blur follows quality."""
        config = BarcodeConfig(
            format=BarcodeFormat.EAN13,
            text="400638133393",
            checksum_type=ChecksumKind.EAN13,
            scale=2,
            quality=QualityLevel.C,
            line_color="#112233",
        )
        request = prepare_config(config)
        assert request.text == "4006381333931"
        assert request.width == 4
        assert request.height == 200
        assert request.font_size == 32
        assert request.margin == 20
        assert request.blur == 1.2
        assert request.quality == QualityLevel.C
        assert request.line_color == "#112233"

    def test_default_style(self):
        """Without a config the default style is used."""
        request = prepare("HELLO", "CODE128")
        assert request.width == 2
        assert request.height == 100
        assert request.blur == 0.0


class TestBatch:
    """Tests for batch preparation."""

    def test_parse_value_list(self):
        """Lines are trimmed and blank lines dropped."""
        raw = "  123 \n\n456\n   \nABC\n"
        assert parse_value_list(raw) == ["123", "456", "ABC"]

    def test_parse_value_list_crlf(self):
        """Windows line endings do not leak into values."""
        assert parse_value_list("123\r\n456\r\n") == ["123", "456"]

    def test_parse_value_list_splits_on_newline_only(self):
        """Only newlines separate values; other separators stay in the value."""
        assert parse_value_list("A\x1cB\nC") == ["A\x1cB", "C"]

    def test_prepare_batch_mixed(self):
        """Invalid values are reported alongside valid ones."""
        entries = prepare_batch(["400638133393", "ABC", "590123412345"], "EAN13", "ean13")
        assert [e.valid for e in entries] == [True, False, True]
        assert entries[0].encoded == "4006381333931"
        assert entries[0].render_value == "4006381333931"
        assert entries[1].encoded is None
        assert entries[1].message == "EAN-13 requires exactly 12 or 13 digits"
        assert entries[2].encoded == "5901234123457"

    def test_prepare_batch_normalizes(self):
        """Render values are normalized; encoded values are not."""
        entries = prepare_batch(["abc"], "CODE39", "mod43")
        assert entries[0].encoded == "abcX"
        assert entries[0].render_value == "ABCX"

    def test_prepare_batch_long_pharmacode(self):
        """A pharmacode far beyond the range is one invalid entry, not an error."""
        entries = prepare_batch(["42", "9" * 5000, "0" * 5000 + "5"], "pharmacode")
        assert [e.valid for e in entries] == [True, False, True]
        assert entries[0].render_value == "42"
        assert entries[2].render_value == "5"

    def test_prepare_batch_empty(self):
        """An empty batch gives no entries."""
        assert prepare_batch([], "CODE39") == []


class TestRandomValues:
    """Tests for random batch values."""

    @pytest.mark.parametrize(
        "fmt",
        ["EAN13", "EAN8", "EAN5", "EAN2", "UPC", "UPCE", "ITF14", "ITF", "MSI", "pharmacode", "CODE39"],
    )
    def test_values_validate(self, fmt):
        """Generated values pass validation for their format."""
        values = generate_random_values(fmt, 20, 7, rng=random.Random(42))
        assert len(values) == 20
        for value in values:
            assert is_valid(value, fmt), value

    def test_fixed_lengths(self):
        """Fixed-length formats ignore the requested length."""
        values = generate_random_values("EAN13", 5, 3, rng=random.Random(1))
        assert all(len(v) == 12 and v.isdigit() for v in values)

    def test_itf_rounds_to_even(self):
        """ITF lengths round down to even, with a minimum of 2."""
        assert random_value_length("ITF", 7) == 6
        assert random_value_length("ITF", 1) == 2
        assert random_value_length("ITF", 8) == 8

    def test_alphanumeric(self):
        """Formats that are not numeric-only draw digits and uppercase letters."""
        values = generate_random_values("CODE128", 10, 8, rng=random.Random(3))
        assert all(len(v) == 8 for v in values)
        assert all(c.isdigit() or c.isupper() for v in values for c in v)

    def test_seed_is_reproducible(self):
        """The same seed gives the same values."""
        first = generate_random_values("CODE39", 3, 6, rng=random.Random(7))
        second = generate_random_values("CODE39", 3, 6, rng=random.Random(7))
        assert first == second

    def test_zero_count(self):
        """A count of zero gives no values."""
        assert generate_random_values("EAN8", 0, 8) == []

    def test_invalid_arguments(self):
        """Negative counts and lengths below one are rejected."""
        with pytest.raises(ValueError):
            generate_random_values("EAN8", -1, 8)
        with pytest.raises(ValueError):
            generate_random_values("EAN8", 1, 0)
