"""
Convert written-out French ariary amounts back to their numeric value.

Receipts print the total twice: in figures and in words. This module reads
the words back so the two can be cross-checked, the same way a cashier
would when re-reading a receipt.

Supported patterns:
    "vingt et un mille ariary"                          → 21000
    "quatre-vingt-dix-neuf"                             → 99
    "deux cents" / "deux cent un"                       → 200 / 201
    "un million deux cent trente-quatre mille ..."      → 1234…
    "Arrêté à la somme de : mille cinq cents ariary."   → 1500
"""

from __future__ import annotations

import re

from .exceptions import InvalidAmountError
from .speller import round_amount

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: dict[str, int] = {
    "zéro": 0,
    "zero": 0,
    "un": 1,
    "une": 1,
    "deux": 2,
    "trois": 3,
    "quatre": 4,
    "cinq": 5,
    "six": 6,
    "sept": 7,
    "huit": 8,
    "neuf": 9,
    "dix": 10,
    "onze": 11,
    "douze": 12,
    "treize": 13,
    "quatorze": 14,
    "quinze": 15,
    "seize": 16,
}

# "quatre-vingt" is folded into one token before splitting (see _normalize)
_TENS: dict[str, int] = {
    "vingt": 20,
    "vingts": 20,
    "trente": 30,
    "quarante": 40,
    "cinquante": 50,
    "soixante": 60,
    "quatrevingt": 80,
}

_SCALES: dict[str, int] = {
    "mille": 1_000,
    "million": 1_000_000,
    "millions": 1_000_000,
    "milliard": 1_000_000_000,
    "milliards": 1_000_000_000,
}

# Words to strip from the input (not part of the number itself)
_IGNORE: set[str] = {
    "et",
    "ariary",
    "ar",
}

_PREAMBLE_RE = re.compile(r"^\s*arr[êe]t[ée]\s+[àa]\s+la\s+somme\s+de\s*:?", re.IGNORECASE)
_QUATRE_VINGT_RE = re.compile(r"quatre[\s-]+vingts?")


# ─── Word Classifier ─────────────────────────────────────────────────


def _classify_and_apply(word: str, current: int, result: int, source: str) -> tuple[int, int]:
    """Classify a single number word and update the running accumulators.

    Returns:
        (new_current, new_result) after processing the word.

    Raises:
        ValueError: If the word is not a recognised number token.
    """
    if word in _ONES:
        return current + _ONES[word], result
    if word in _TENS:
        return current + _TENS[word], result
    if word in ("cent", "cents"):
        effective = current if current else 1
        return effective * 100, result
    if word in _SCALES:
        effective = current if current else 1
        return 0, result + effective * _SCALES[word]
    raise ValueError(f"Unrecognized number word: {word!r} in {source!r}")


def _normalize(text: str) -> list[str]:
    """Strip the receipt preamble and punctuation, split into lowercase words."""
    normalized = _PREAMBLE_RE.sub("", text.strip()).strip().rstrip(".").lower()
    normalized = _QUATRE_VINGT_RE.sub("quatrevingt", normalized)
    words = normalized.replace("-", " ").replace(",", " ").split()
    return [w for w in words if w not in _IGNORE]


# ─── Main Converter ─────────────────────────────────────────────────


def words_to_amount(text: str) -> int:
    """Convert French number words to an integer amount of ariary.

    Args:
        text: e.g. "vingt et un mille ariary"

    Returns:
        21000

    Raises:
        ValueError: If the text is empty or contains unrecognized words.

    Algorithm:
        Two accumulators, as for any scale-based numeral system:
        - `result`: completed scale groups (after "mille", "million", ...)
        - `current`: the group being built

        Units, teens and tens add to `current` (soixante + onze = 71,
        quatre-vingt + dix + neuf = 99). "cent" multiplies `current` by 100.
        A scale word flushes `current * scale` into `result`.
    """
    if not text or not text.strip():
        raise ValueError("Empty text cannot be converted to a number")

    words = _normalize(text)
    if not words:
        raise ValueError(f"No number words found in: {text!r}")

    result = 0
    current = 0

    for word in words:
        current, result = _classify_and_apply(word, current, result, text)

    result += current

    if result == 0 and not {"zéro", "zero"} & set(words):
        raise ValueError(f"Could not parse a valid number from: {text!r}")

    return result


def amount_matches_words(amount: object, text: str) -> bool:
    """True when the rounded amount and its written form agree."""
    try:
        return round_amount(amount) == words_to_amount(text)
    except (InvalidAmountError, ValueError):
        return False
