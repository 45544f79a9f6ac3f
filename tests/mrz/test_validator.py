"""Unit tests for ICAO 9303 validator."""

import pytest

from src.mrz.validator import (
    calculate_check_digit,
    char_value,
    is_mrz_charset,
    validate_check_digit,
    validate_date,
    validate_document_code,
    validate_sex,
)


class TestCharValue:
    """Test character to value mapping."""

    def test_digits_map_to_themselves(self):
        """Test digits 0-9 keep their value."""
        for digit in range(10):
            assert char_value(str(digit)) == digit

    def test_letters_map_from_ten(self):
        """Test letters map to position in alphabet + 10."""
        assert char_value("A") == 10
        assert char_value("L") == 21
        assert char_value("Z") == 35

    def test_filler_maps_to_zero(self):
        """Test filler character has value 0."""
        assert char_value("<") == 0

    def test_invalid_characters(self):
        """Test error handling for characters outside the MRZ set."""
        with pytest.raises(ValueError, match="Invalid character"):
            char_value("a")

        with pytest.raises(ValueError, match="Invalid character"):
            char_value("*")

        with pytest.raises(ValueError, match="Invalid character"):
            char_value("")


class TestCalculateCheckDigit:
    """Test weighted modulo-10 check digit calculation."""

    def test_icao_specimen_fields(self):
        """Test with check digits printed on the ICAO specimen documents."""
        assert calculate_check_digit("L898902C3") == 6
        assert calculate_check_digit("D23145890") == 7
        assert calculate_check_digit("740812") == 2
        assert calculate_check_digit("120415") == 9
        assert calculate_check_digit("ZE184226B<<<<<") == 1

    def test_td3_composite(self):
        """Test composite check digit of the TD3 specimen."""
        composite = "L898902C36" + "7408122" + "1204159ZE184226B<<<<<1"
        assert calculate_check_digit(composite) == 0

    def test_weights_cycle(self):
        """Test weights 7, 3, 1 are applied in a repeating cycle."""
        assert calculate_check_digit("1") == 7
        assert calculate_check_digit("01") == 3
        assert calculate_check_digit("001") == 1
        assert calculate_check_digit("0001") == 7

    def test_filler_only_field(self):
        """Test an all-filler field has check digit 0."""
        assert calculate_check_digit("<<<<<<<<<<<<<<") == 0
        assert calculate_check_digit("") == 0

    def test_invalid_characters(self):
        """Test error handling for invalid characters."""
        with pytest.raises(ValueError, match="Invalid character"):
            calculate_check_digit("L8989O2c3")


class TestValidateCheckDigit:
    """Test check character validation."""

    def test_valid_check_digit(self):
        """Test matching check digit."""
        assert validate_check_digit("740812", "2") == (True, 2)

    def test_invalid_check_digit(self):
        """Test mismatching check digit reports the expected value."""
        assert validate_check_digit("740812", "3") == (False, 2)

    def test_non_digit_check_character(self):
        """Test letters or fillers in the check position fail."""
        is_valid, expected = validate_check_digit("740812", "A")
        assert is_valid is False
        assert expected == 2

        is_valid, _ = validate_check_digit("740812", "<")
        assert is_valid is False

    def test_invalid_characters_in_value(self):
        """Test fields with non-MRZ characters fail without raising."""
        assert validate_check_digit("74-812", "2") == (False, None)

    def test_allow_filler_for_empty_field(self):
        """Test filler check character accepted for all-filler fields."""
        assert validate_check_digit("<<<<<<<<<<<<<<", "<", allow_filler=True) == (True, 0)
        assert validate_check_digit("<<<<<<<<<<<<<<", "0", allow_filler=True) == (True, 0)
        assert validate_check_digit("<<<<<<<<<<<<<<", "<") == (False, 0)

    def test_allow_filler_requires_empty_field(self):
        """Test filler check character rejected when the field has data."""
        is_valid, expected = validate_check_digit("ZE184226B<<<<<", "<", allow_filler=True)
        assert is_valid is False
        assert expected == 1


class TestFieldFormats:
    """Test field format checks."""

    def test_charset(self):
        """Test MRZ character set detection."""
        assert is_mrz_charset("P<UTOERIKSSON<<ANNA")
        assert is_mrz_charset("")
        assert not is_mrz_charset("P<UTO ERIKSSON")
        assert not is_mrz_charset("p<uto")
        assert not is_mrz_charset("P«UTO")

    def test_valid_dates(self):
        """Test well-formed YYMMDD dates."""
        assert validate_date("740812")
        assert validate_date("000101")
        assert validate_date("991231")

    def test_invalid_dates(self):
        """Test malformed dates."""
        assert not validate_date("741312")  # Month 13
        assert not validate_date("740800")  # Day 0
        assert not validate_date("740832")  # Day 32
        assert not validate_date("74O812")  # Letter O
        assert not validate_date("<<<<<<")
        assert not validate_date("74081")

    def test_sex_markers(self):
        """Test accepted sex markers."""
        for marker in ("M", "F", "X", "<"):
            assert validate_sex(marker)
        assert not validate_sex("Q")
        assert not validate_sex("")

    def test_document_code(self):
        """Test document code must start with a letter."""
        assert validate_document_code("P<")
        assert validate_document_code("ID")
        assert not validate_document_code("<<")
        assert not validate_document_code("1<")
        assert not validate_document_code("")
