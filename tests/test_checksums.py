"""
Tests for the checksum algorithm library.
"""

import pytest

from barcodestudio.barcode.checksums import (
    CHECK_CHARACTER_FUNCTIONS,
    calculate_7check_dr_checksum,
    calculate_ean8_checksum,
    calculate_ean13_checksum,
    calculate_japan_nw7_checksum,
    calculate_jrc_checksum,
    calculate_luhn_checksum,
    calculate_mod10,
    calculate_mod10_weight2_checksum,
    calculate_mod10_weight3_checksum,
    calculate_mod11,
    calculate_mod11_pzn_checksum,
    calculate_mod11a_checksum,
    calculate_mod16_checksum,
    calculate_mod16_japan_checksum,
    calculate_mod43_checksum,
    calculate_upc_checksum,
    check_character,
    digital_root,
    digits_of,
    validate_ean8_checksum,
    validate_ean13_checksum,
    validate_upc_checksum,
)
from barcodestudio.models import ChecksumKind


def luhn_sum_is_valid(code: str) -> bool:
    """Reference Luhn validation: double every second digit from the right."""
    total = 0
    for i, c in enumerate(reversed(code)):
        d = int(c)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


class TestHelpers:
    """Tests for digit extraction and digital root."""

    def test_digits_of_strips_non_digits(self):
        """Everything but digits is dropped."""
        assert digits_of("12-3 a4") == [1, 2, 3, 4]

    def test_digits_of_ignores_non_ascii_digits(self):
        """Only ASCII digits are kept."""
        assert digits_of("١٢3") == [3]

    def test_digits_of_empty(self):
        """No digits gives an empty list."""
        assert digits_of("ABC") == []

    def test_digital_root(self):
        """Digital root of 0, single and two-digit values."""
        assert digital_root(0) == 0
        assert digital_root(9) == 9
        assert digital_root(38) == 2
        assert digital_root(99) == 9


class TestMod10:
    """Tests for the Modulo 10 (Luhn generation) check digit."""

    def test_known_luhn_vector(self):
        """The textbook Luhn example yields 3."""
        assert calculate_mod10("7992739871") == 3

    def test_short_input(self):
        """Short payloads compute normally."""
        assert calculate_mod10("123") == 0
        assert calculate_mod10("12") == 5

    def test_appended_digit_passes_luhn(self):
        """Appending the check digit yields a weighted sum divisible by 10."""
        for code in ["1", "12", "123", "4006381333", "987654321", "5", "0000"]:
            check = calculate_mod10(code)
            assert 0 <= check <= 9
            assert luhn_sum_is_valid(code + str(check)), code

    def test_non_digits_are_ignored(self):
        """Separators do not change the check digit."""
        assert calculate_mod10("12-3") == calculate_mod10("123")

    def test_empty_digit_sequence(self):
        """No digits gives 0."""
        assert calculate_mod10("") == 0
        assert calculate_mod10("ABC") == 0


class TestMod11:
    """Tests for Modulo 11 and Modulo 11-A."""

    def test_mod11_known_values(self):
        """Known Modulo 11 check values."""
        assert calculate_mod11("12345") == 5
        assert calculate_mod11("1234567") == 4
        assert calculate_mod11("0") == 0

    def test_mod11_ten(self):
        """A remainder giving 10 is returned as 10."""
        assert calculate_mod11("6") == 10

    def test_mod11_range(self):
        """Results stay within 0 to 10."""
        for code in ["1", "99", "123456789", "5555", "31415926"]:
            assert 0 <= calculate_mod11(code) <= 10

    def test_mod11a_known_values(self):
        """Known Modulo 11-A check characters."""
        assert calculate_mod11a_checksum("12345") == "5"
        assert calculate_mod11a_checksum("1234567") == "9"
        assert calculate_mod11a_checksum("0") == "0"

    def test_mod11a_x(self):
        """A result of 10 is rendered as X."""
        assert calculate_mod11a_checksum("6") == "X"

    def test_mod11_and_mod11a_differ_past_six_digits(self):
        """The weight cycles differ once the payload exceeds six digits."""
        assert str(calculate_mod11("1234567")) != calculate_mod11a_checksum("1234567")

    def test_pzn(self):
        """PZN weights digits by position."""
        assert calculate_mod11_pzn_checksum("123456") == "3"

    def test_pzn_remainder_ten_is_zero(self):
        """A PZN remainder of 10 becomes 0."""
        assert calculate_mod11_pzn_checksum("05") == "0"


class TestAlphabetChecksums:
    """Tests for Modulo 43, Modulo 16 and Japan NW-7."""

    def test_mod43_code39(self):
        """The classic CODE39 example yields W."""
        # C=12 O=24 D=13 E=14 3=3 9=9 -> 75 mod 43 = 32 -> 'W'
        assert calculate_mod43_checksum("CODE39") == "W"

    def test_mod43_is_case_insensitive(self):
        """Lowercase letters are uppercased first."""
        assert calculate_mod43_checksum("code39") == "W"

    def test_mod43_ignores_unknown_characters(self):
        """Characters outside the alphabet are skipped."""
        assert calculate_mod43_checksum("CODE39!") == "W"
        assert calculate_mod43_checksum("ABC") == "X"

    def test_mod43_empty(self):
        """An empty value yields the first alphabet character."""
        assert calculate_mod43_checksum("") == "0"

    def test_mod16(self):
        """Modulo 16 over the codabar alphabet."""
        assert calculate_mod16_checksum("123") == "6"
        assert calculate_mod16_checksum("$-") == "5"
        assert calculate_mod16_checksum("+++") == "/"

    def test_mod16_skips_start_stop_letters(self):
        """Start and stop letters do not count."""
        assert calculate_mod16_checksum("A123B") == "6"

    def test_japan_nw7(self):
        """Japan NW-7 over the NW-7 alphabet."""
        assert calculate_japan_nw7_checksum("123") == "-"
        assert calculate_japan_nw7_checksum("A1") == "+"

    def test_japan_nw7_uppercases(self):
        """Lowercase start letters are uppercased."""
        assert calculate_japan_nw7_checksum("a") == calculate_japan_nw7_checksum("A") == "0"

    def test_mod16_japan(self):
        """Modulo 16 Japan includes the extended letters."""
        assert calculate_mod16_japan_checksum("123") == "6"
        assert calculate_mod16_japan_checksum("E") == "7"
        assert calculate_mod16_japan_checksum("T") == "4"
        assert calculate_mod16_japan_checksum("e") == "7"


class TestWeightedChecksums:
    """Tests for JRC, Luhn variant and weighted Modulo 10 algorithms."""

    def test_jrc(self):
        """JRC weights digits alternately."""
        assert calculate_jrc_checksum("1234") == "4"
        assert calculate_jrc_checksum("59") == "7"

    def test_luhn_variant(self):
        """The Luhn variant on a short payload."""
        assert calculate_luhn_checksum("123") == "2"

    def test_luhn_variant_matches_mod10_with_trailing_zero(self):
        """Over payload plus a zero the variant equals mod 10."""
        assert calculate_luhn_checksum("79927398710") == "3"
        for code in ["123", "4006381333", "987654321"]:
            assert calculate_luhn_checksum(code + "0") == str(calculate_mod10(code))

    def test_luhn_variant_differs_from_mod10(self):
        """The variant is not the same as mod 10 on the bare payload."""
        assert calculate_luhn_checksum("123") != str(calculate_mod10("123"))

    def test_weight2_subtracts_nine(self):
        """Doubled digits over 9 have 9 subtracted."""
        assert calculate_mod10_weight2_checksum("1234") == "4"
        assert calculate_mod10_weight2_checksum("59") == "6"

    def test_weight3(self):
        """Weight 3 alternates weights 3 and 1."""
        assert calculate_mod10_weight3_checksum("1234") == "8"

    def test_7check_dr(self):
        """7 Check DR known values."""
        assert calculate_7check_dr_checksum("123456") == "4"
        assert calculate_7check_dr_checksum("7") == "0"
        assert calculate_7check_dr_checksum("99") == "5"


class TestEANUPC:
    """Tests for EAN and UPC check digits."""

    def test_calculate_ean13_checksum(self):
        """Known EAN-13 check digits."""
        assert calculate_ean13_checksum("400638133393") == 1
        assert calculate_ean13_checksum("590123412345") == 7
        assert calculate_ean13_checksum("001234567890") == 5

    def test_ean13_uses_first_twelve_digits(self):
        """A thirteenth digit is ignored."""
        assert calculate_ean13_checksum("4006381333931") == 1

    def test_calculate_ean8_checksum(self):
        """Known EAN-8 check digits."""
        assert calculate_ean8_checksum("9638507") == 4
        assert calculate_ean8_checksum("5512345") == 7

    def test_calculate_upc_checksum(self):
        """Known UPC-A check digits."""
        assert calculate_upc_checksum("03600029145") == 2
        assert calculate_upc_checksum("01234567890") == 5

    def test_validate_ean13(self):
        """Full EAN-13 codes verify; wrong digits or lengths do not."""
        assert validate_ean13_checksum("4006381333931")
        assert validate_ean13_checksum("9780201379624")
        assert not validate_ean13_checksum("4006381333932")
        assert not validate_ean13_checksum("400638133393")
        assert not validate_ean13_checksum("400638133393A")

    def test_validate_ean8(self):
        """Full EAN-8 codes verify; wrong digits do not."""
        assert validate_ean8_checksum("96385074")
        assert not validate_ean8_checksum("96385075")
        assert not validate_ean8_checksum("9638507A")

    def test_validate_upc(self):
        """Full UPC-A codes verify; wrong digits or lengths do not."""
        assert validate_upc_checksum("036000291452")
        assert validate_upc_checksum("012345678905")
        assert not validate_upc_checksum("036000291453")
        assert not validate_upc_checksum("1234567890")


class TestCheckCharacter:
    """Tests for the kind -> check character dispatch."""

    def test_every_kind_is_dispatchable(self):
        """Every checksum kind has a function."""
        assert set(CHECK_CHARACTER_FUNCTIONS) == set(ChecksumKind)

    def test_none_is_empty(self):
        """Kind none yields no character."""
        assert check_character(ChecksumKind.NONE, "123") == ""

    def test_mod11_ten_renders_x(self):
        """A mod 11 result of 10 is dispatched as X."""
        assert check_character(ChecksumKind.MOD11, "6") == "X"

    def test_numeric_results_are_strings(self):
        """Integer results are returned as strings."""
        assert check_character(ChecksumKind.MOD10, "7992739871") == "3"
        assert check_character(ChecksumKind.EAN13, "400638133393") == "1"
        assert check_character(ChecksumKind.UPC, "03600029145") == "2"

    @pytest.mark.parametrize("kind", list(ChecksumKind))
    def test_deterministic(self, kind):
        """Each kind returns the same character for the same input."""
        for value in ["1234567", "CODE39", "A123B", ""]:
            assert check_character(kind, value) == check_character(kind, value)
