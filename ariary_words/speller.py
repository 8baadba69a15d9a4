"""
Convert a monetary amount in ariary to its written-out French form.

Every receipt and receipt e-mail carries the total spelled out in words.
The converter sits inside string-interpolation contexts (HTML templates,
e-mail payloads), so the template-facing functions NEVER raise: invalid
input collapses to the "montant invalide" sentinel.

Supported patterns:
    0        → "zéro ariary"
    21       → "vingt et un ariary"
    71       → "soixante-onze ariary"
    80       → "quatre-vingt ariary"      (invariant, no trailing s)
    200      → "deux cents ariary"
    201      → "deux cent un ariary"
    21000    → "vingt et un mille ariary"
    2000000  → "deux millions ariary"
    21.7     → "vingt-deux ariary"        (rounded half-up first)
    -1, NaN  → "montant invalide"
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .exceptions import AmountOutOfRangeError, InvalidAmountError
from .models import AmountInWords

logger = logging.getLogger(__name__)


# ─── Word Lookup Tables ──────────────────────────────────────────────

_UNITS: tuple[str, ...] = (
    "zéro",
    "un",
    "deux",
    "trois",
    "quatre",
    "cinq",
    "six",
    "sept",
    "huit",
    "neuf",
    "dix",
    "onze",
    "douze",
    "treize",
    "quatorze",
    "quinze",
    "seize",
    "dix-sept",
    "dix-huit",
    "dix-neuf",
)

# 70 and 90 are built from the teens (soixante-onze, quatre-vingt-onze),
# so their slots stay empty.
_TENS: tuple[str, ...] = (
    "",
    "",
    "vingt",
    "trente",
    "quarante",
    "cinquante",
    "soixante",
    "",
    "quatre-vingt",
    "",
)

_SCALES: tuple[tuple[int, str], ...] = (
    (1_000_000_000, "milliard"),
    (1_000_000, "million"),
    (1_000, "mille"),
)

CURRENCY_NAME = "ariary"
INVALID_AMOUNT = "montant invalide"
RECEIPT_PREAMBLE = "Arrêté à la somme de :"

# Largest amount whose milliard count still fits the 0–999 converter
MAX_AMOUNT = 999_999_999_999


# ─── Sub-converters ──────────────────────────────────────────────────


def _convert_tens(num: int) -> str:
    """Spell 0–99 (0 is handled by the callers)."""
    if num < 20:
        return _UNITS[num]

    tens_digit, units_digit = divmod(num, 10)

    if tens_digit == 7:
        return "soixante-dix" if units_digit == 0 else f"soixante-{_UNITS[10 + units_digit]}"
    if tens_digit == 9:
        return "quatre-vingt-dix" if units_digit == 0 else f"quatre-vingt-{_UNITS[10 + units_digit]}"

    tens_word = _TENS[tens_digit]
    if units_digit == 0:
        return tens_word
    if units_digit == 1 and tens_digit <= 6:
        return f"{tens_word} et un"
    return f"{tens_word}-{_UNITS[units_digit]}"


def _convert_hundreds(num: int) -> str:
    """Spell 0–999. Returns an empty string for 0."""
    if num == 0:
        return ""

    hundreds, rest = divmod(num, 100)
    parts: list[str] = []

    if hundreds == 1:
        parts.append("cent")
    elif hundreds > 1:
        # "cents" only when nothing follows: deux cents / deux cent un
        parts.append(f"{_UNITS[hundreds]} {'cents' if rest == 0 else 'cent'}")

    if rest > 0:
        parts.append(_convert_tens(rest))

    return " ".join(parts)


# ─── Strict API ──────────────────────────────────────────────────────


def round_amount(amount: object) -> int:
    """Validate an amount and round it half-up to whole ariary.

    Args:
        amount: int, float or Decimal.

    Returns:
        The rounded, non-negative integer amount.

    Raises:
        InvalidAmountError: If the amount is not a number, not finite, or negative.
        AmountOutOfRangeError: If the rounded amount is above MAX_AMOUNT.
    """
    # bool is an int subclass
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise InvalidAmountError(
            f"Amount must be a number, got {type(amount).__name__}",
            details={"type": type(amount).__name__},
        )

    # Range-check ints before str(): huge ints hit the int-to-string digit limit
    if isinstance(amount, int):
        if amount < 0:
            raise InvalidAmountError("Amount is negative")
        if amount > MAX_AMOUNT:
            raise _out_of_range()
        return amount

    # str() first so 21.7 rounds as written, not as its binary approximation
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as e:
        raise InvalidAmountError("Amount is not a number") from e

    if not value.is_finite():
        raise InvalidAmountError("Amount is not finite", details={"amount": str(value)})
    if value < 0:
        raise InvalidAmountError("Amount is negative")

    rounded = value.to_integral_value(rounding=ROUND_HALF_UP)
    if rounded > MAX_AMOUNT:
        raise _out_of_range()

    return int(rounded)


def spell_integer(num: int) -> str:
    """Spell a non-negative integer in French, without the currency name.

    Algorithm:
        Peel off milliards, millions and milliers in descending order; each
        count goes through the 0–999 converter. "mille" never takes "un" in
        front of it nor an "s" after it; million/milliard pluralize when the
        count is above one. Whatever remains below 1000 is spelled last.

    Raises:
        InvalidAmountError: If `num` is negative.
        AmountOutOfRangeError: If `num` is above MAX_AMOUNT.
    """
    if num < 0:
        raise InvalidAmountError("Cannot spell a negative number")
    if num > MAX_AMOUNT:
        raise _out_of_range()
    if num == 0:
        return _UNITS[0]

    parts: list[str] = []
    remaining = num

    for scale_value, scale_name in _SCALES:
        count, remaining = divmod(remaining, scale_value)
        if count == 0:
            continue

        if scale_value == 1_000:
            parts.append("mille" if count == 1 else f"{_convert_hundreds(count)} mille")
        else:
            plural = "s" if count > 1 else ""
            parts.append(f"{_convert_hundreds(count)} {scale_name}{plural}")

    if remaining > 0:
        parts.append(_convert_hundreds(remaining))

    return " ".join(parts)


def spell_amount(amount: object) -> AmountInWords:
    """Spell an amount and report whether the input was usable."""
    try:
        rounded = round_amount(amount)
        words = f"{spell_integer(rounded)} {CURRENCY_NAME}"
    except InvalidAmountError as e:
        logger.debug("Invalid amount (%s): %s", e.code, e)
        return AmountInWords(
            words=INVALID_AMOUNT,
            sentence=_wrap_sentence(INVALID_AMOUNT),
            is_valid=False,
            error_code=e.code,
        )

    return AmountInWords(
        rounded=rounded,
        words=words,
        sentence=_wrap_sentence(words),
        is_valid=True,
    )


# ─── Template-facing API (never raises) ──────────────────────────────


def convert_amount_to_words(amount: object) -> str:
    """Convert an ariary amount to French words, suffixed with "ariary".

    Args:
        amount: e.g. 21000, 21.7, Decimal("1500")

    Returns:
        "vingt et un mille ariary", or "montant invalide" for negative,
        non-finite, non-numeric or out-of-range input.
    """
    try:
        return f"{spell_integer(round_amount(amount))} {CURRENCY_NAME}"
    except InvalidAmountError as e:
        logger.debug("Invalid amount (%s): %s", e.code, e)
        return INVALID_AMOUNT


def format_amount_in_words(amount: object) -> str:
    """The receipt line: "Arrêté à la somme de : <words>."."""
    return _wrap_sentence(convert_amount_to_words(amount))


def get_amount_in_words(amount: object) -> str:
    """Bare words for e-mail template variables (caller supplies the wording)."""
    return convert_amount_to_words(amount)


def _out_of_range() -> AmountOutOfRangeError:
    # The offending value stays out of the message: it may be too long to format
    return AmountOutOfRangeError(
        f"Amount exceeds the largest spellable amount ({MAX_AMOUNT})",
        details={"max_amount": MAX_AMOUNT},
    )


def _wrap_sentence(words: str) -> str:
    return f"{RECEIPT_PREAMBLE} {words}."
