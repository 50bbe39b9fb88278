"""Tests for the ID card checksum algorithm."""

import pytest

from fireeye.validators.idcard import (
    CHECK_CODES,
    WEIGHT,
    is_new_cn_id_card,
    is_old_cn_id_card,
    is_valid_id_card,
)

VALID_18 = "11010519491231002X"
VALID_15 = "110105491231002"


class TestNewFormat:
    def test_classic_example(self):
        assert is_new_cn_id_card(VALID_18) is True
        assert is_valid_id_card(VALID_18) is True

    def test_numeric_check_character(self):
        # Raising the last weighted digit by one adds 2 to the sum: 169 % 11 == 4
        assert is_valid_id_card("110105194912310038") is True

    def test_lowercase_x_is_rejected(self):
        assert is_valid_id_card(VALID_18.lower()) is False

    @pytest.mark.parametrize("position", range(17))
    def test_single_digit_mutation_flips_checksum(self, position):
        original = int(VALID_18[position])
        mutated = str((original + 1) % 10)
        value = VALID_18[:position] + mutated + VALID_18[position + 1:]
        assert is_valid_id_card(value) is False

    def test_non_digit_in_weighted_positions_fails(self):
        assert is_valid_id_card("1101051949123100AX") is False
        assert is_valid_id_card("11010519491231٣02X") is False

    def test_tables(self):
        assert len(WEIGHT) == 17
        assert CHECK_CODES[2] == "X"


class TestLegacyFormat:
    def test_valid(self):
        assert is_old_cn_id_card(VALID_15) is True
        assert is_valid_id_card(VALID_15) is True

    def test_leading_zero_region_rejected(self):
        assert is_valid_id_card("010105491231002") is False

    def test_non_digit_region_rejected(self):
        assert is_valid_id_card("1A0105491231002") is False

    def test_bad_birth_date_rejected(self):
        assert is_valid_id_card("110105491331002") is False

    def test_bad_suffix_rejected(self):
        assert is_valid_id_card("1101054912310A2") is False


class TestLengthGuard:
    @pytest.mark.parametrize("value", ["", "1234567890123456", "1101051949123100211", "12345"])
    def test_other_lengths_rejected(self, value):
        assert is_valid_id_card(value) is False
