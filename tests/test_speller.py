"""
Test suite for the ariary amount speller.

Every pinned receipt wording is checked as an exact string — a single
missing "s" or hyphen shows up on every printed receipt.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from ariary_words.exceptions import AmountOutOfRangeError, InvalidAmountError
from ariary_words.speller import (
    INVALID_AMOUNT,
    MAX_AMOUNT,
    convert_amount_to_words,
    format_amount_in_words,
    get_amount_in_words,
    round_amount,
    spell_amount,
    spell_integer,
)


# ═══════════════════════════════════════════════════════════════════════
# BASIC NUMBERS
# ═══════════════════════════════════════════════════════════════════════


class TestBasicNumbers:
    def test_zero(self):
        assert convert_amount_to_words(0) == "zéro ariary"

    def test_one(self):
        assert convert_amount_to_words(1) == "un ariary"

    def test_fifteen(self):
        assert convert_amount_to_words(15) == "quinze ariary"

    def test_twenty_one_uses_et(self):
        assert convert_amount_to_words(21) == "vingt et un ariary"

    def test_teens_are_hyphenated(self):
        assert convert_amount_to_words(17) == "dix-sept ariary"

    def test_plain_compound(self):
        assert convert_amount_to_words(45) == "quarante-cinq ariary"

    def test_sixty_one_uses_et(self):
        assert convert_amount_to_words(61) == "soixante et un ariary"


# ═══════════════════════════════════════════════════════════════════════
# IRREGULAR TENS (70–99)
# ═══════════════════════════════════════════════════════════════════════


class TestIrregularTens:
    """70–79 and 90–99 are built on the teens, not on a tens word."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (70, "soixante-dix ariary"),
            (71, "soixante-onze ariary"),
            (77, "soixante-dix-sept ariary"),
            (80, "quatre-vingt ariary"),
            (81, "quatre-vingt-un ariary"),
            (85, "quatre-vingt-cinq ariary"),
            (90, "quatre-vingt-dix ariary"),
            (91, "quatre-vingt-onze ariary"),
            (99, "quatre-vingt-dix-neuf ariary"),
        ],
    )
    def test_irregular_family(self, amount, expected):
        assert convert_amount_to_words(amount) == expected

    def test_eighty_stays_singular(self):
        assert "quatre-vingts" not in convert_amount_to_words(80)

    def test_no_et_after_seventy_or_ninety(self):
        assert " et " not in convert_amount_to_words(71)
        assert " et " not in convert_amount_to_words(81)
        assert " et " not in convert_amount_to_words(91)


# ═══════════════════════════════════════════════════════════════════════
# HUNDREDS
# ═══════════════════════════════════════════════════════════════════════


class TestHundreds:
    def test_hundred(self):
        assert convert_amount_to_words(100) == "cent ariary"

    def test_hundred_and_one(self):
        assert convert_amount_to_words(101) == "cent un ariary"

    def test_two_hundred_pluralized(self):
        assert convert_amount_to_words(200) == "deux cents ariary"

    def test_cents_loses_s_when_followed(self):
        assert convert_amount_to_words(201) == "deux cent un ariary"

    def test_nine_hundred_ninety_nine(self):
        assert convert_amount_to_words(999) == "neuf cent quatre-vingt-dix-neuf ariary"


# ═══════════════════════════════════════════════════════════════════════
# THOUSANDS
# ═══════════════════════════════════════════════════════════════════════


class TestThousands:
    def test_thousand_has_no_un(self):
        assert convert_amount_to_words(1000) == "mille ariary"

    def test_thousand_and_one(self):
        assert convert_amount_to_words(1001) == "mille un ariary"

    def test_eleven_hundred(self):
        assert convert_amount_to_words(1100) == "mille cent ariary"

    def test_two_thousand_mille_invariant(self):
        assert convert_amount_to_words(2000) == "deux mille ariary"

    def test_ten_thousand(self):
        assert convert_amount_to_words(10000) == "dix mille ariary"

    def test_twenty_one_thousand(self):
        assert convert_amount_to_words(21000) == "vingt et un mille ariary"

    def test_hundred_thousand(self):
        assert convert_amount_to_words(100000) == "cent mille ariary"


# ═══════════════════════════════════════════════════════════════════════
# MILLIONS & MILLIARDS
# ═══════════════════════════════════════════════════════════════════════


class TestMillions:
    def test_one_million(self):
        assert convert_amount_to_words(1_000_000) == "un million ariary"

    def test_two_millions_pluralized(self):
        assert convert_amount_to_words(2_000_000) == "deux millions ariary"

    def test_full_composition(self):
        assert convert_amount_to_words(1_234_567) == (
            "un million deux cent trente-quatre mille cinq cent soixante-sept ariary"
        )

    def test_one_milliard(self):
        assert convert_amount_to_words(1_000_000_000) == "un milliard ariary"

    def test_three_milliards_pluralized(self):
        assert convert_amount_to_words(3_000_000_000) == "trois milliards ariary"

    def test_largest_spellable_amount(self):
        assert convert_amount_to_words(MAX_AMOUNT) == (
            "neuf cent quatre-vingt-dix-neuf milliards "
            "neuf cent quatre-vingt-dix-neuf millions "
            "neuf cent quatre-vingt-dix-neuf mille "
            "neuf cent quatre-vingt-dix-neuf ariary"
        )


# ═══════════════════════════════════════════════════════════════════════
# INVALID INPUT & ROUNDING
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidInput:
    """Bad input must never break a receipt render."""

    @pytest.mark.parametrize(
        "amount",
        [-1, -0.6, float("nan"), float("inf"), float("-inf"), None, "1000", True, Decimal("NaN")],
    )
    def test_returns_sentinel(self, amount):
        assert convert_amount_to_words(amount) == INVALID_AMOUNT

    def test_out_of_range_returns_sentinel(self):
        assert convert_amount_to_words(MAX_AMOUNT + 1) == INVALID_AMOUNT

    def test_huge_int_returns_sentinel(self):
        # Too many digits for int-to-string conversion
        assert convert_amount_to_words(10**5000) == INVALID_AMOUNT

    def test_huge_negative_int_returns_sentinel(self):
        assert convert_amount_to_words(-(10**5000)) == INVALID_AMOUNT

    def test_huge_decimal_returns_sentinel(self):
        assert convert_amount_to_words(Decimal("1E+50000")) == INVALID_AMOUNT

    def test_huge_amounts_report_out_of_range(self):
        assert spell_amount(10**5000).error_code == "AMOUNT_OUT_OF_RANGE"
        assert spell_amount(Decimal("1E+50000")).error_code == "AMOUNT_OUT_OF_RANGE"

    def test_fraction_rounding_past_max_is_out_of_range(self):
        assert convert_amount_to_words(Decimal(MAX_AMOUNT) + Decimal("0.4")) != INVALID_AMOUNT
        assert convert_amount_to_words(Decimal(MAX_AMOUNT) + Decimal("0.5")) == INVALID_AMOUNT

    def test_negative_zero_is_zero(self):
        assert convert_amount_to_words(-0.0) == "zéro ariary"


class TestRounding:
    def test_rounds_up(self):
        assert convert_amount_to_words(21.7) == "vingt-deux ariary"

    def test_rounds_down(self):
        assert convert_amount_to_words(21.3) == "vingt et un ariary"

    def test_half_rounds_up(self):
        assert round_amount(2.5) == 3
        assert round_amount(0.5) == 1

    def test_small_fraction_rounds_to_zero(self):
        assert convert_amount_to_words(0.4) == "zéro ariary"

    def test_decimal_input(self):
        assert convert_amount_to_words(Decimal("1499.50")) == "mille cinq cents ariary"

    def test_round_amount_rejects_negative(self):
        with pytest.raises(InvalidAmountError, match="negative"):
            round_amount(-5)

    def test_round_amount_rejects_non_number(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            round_amount("12")
        assert exc_info.value.code == "INVALID_AMOUNT"


# ═══════════════════════════════════════════════════════════════════════
# STRICT HELPERS
# ═══════════════════════════════════════════════════════════════════════


class TestSpellInteger:
    def test_zero_has_no_currency(self):
        assert spell_integer(0) == "zéro"

    def test_negative_raises(self):
        with pytest.raises(InvalidAmountError):
            spell_integer(-1)

    def test_out_of_range_raises(self):
        with pytest.raises(AmountOutOfRangeError) as exc_info:
            spell_integer(MAX_AMOUNT + 1)
        assert exc_info.value.code == "AMOUNT_OUT_OF_RANGE"
        assert exc_info.value.details["max_amount"] == MAX_AMOUNT

    def test_huge_int_raises_out_of_range(self):
        with pytest.raises(AmountOutOfRangeError):
            spell_integer(10**5000)

    def test_round_amount_rejects_huge_decimal(self):
        with pytest.raises(AmountOutOfRangeError):
            round_amount(Decimal("1E+50000"))


class TestSpellAmount:
    def test_valid_result(self):
        result = spell_amount(21000)
        assert result.is_valid is True
        assert result.rounded == 21000
        assert result.words == "vingt et un mille ariary"
        assert result.sentence == "Arrêté à la somme de : vingt et un mille ariary."
        assert result.error_code is None

    def test_invalid_result(self):
        result = spell_amount(-1)
        assert result.is_valid is False
        assert result.rounded is None
        assert result.words == INVALID_AMOUNT
        assert result.error_code == "INVALID_AMOUNT"

    def test_out_of_range_code(self):
        assert spell_amount(10**13).error_code == "AMOUNT_OUT_OF_RANGE"


# ═══════════════════════════════════════════════════════════════════════
# PRESENTATION WRAPPERS
# ═══════════════════════════════════════════════════════════════════════


class TestWrappers:
    def test_receipt_sentence(self):
        assert format_amount_in_words(21000) == "Arrêté à la somme de : vingt et un mille ariary."

    def test_receipt_sentence_fifteen_hundred(self):
        assert format_amount_in_words(1500) == "Arrêté à la somme de : mille cinq cents ariary."

    def test_receipt_sentence_for_invalid_amount(self):
        assert format_amount_in_words(-1) == "Arrêté à la somme de : montant invalide."

    def test_bare_words_for_email(self):
        assert get_amount_in_words(1000) == "mille ariary"
