#!/usr/bin/env python3
"""
Ariary Words — Entry Point
===========================

Prints French amount-in-words for a list of ariary amounts, and reads each
phrase back to check it against the figure.

Usage:
    python main.py                    # Reference listing (0, 1, 15, 21, 70, ...)
    python main.py 1500 21.7 -1       # Your own amounts
    LOG_LEVEL=DEBUG python main.py -1 # See why an amount was rejected
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from ariary_words.speller import INVALID_AMOUNT, format_amount_in_words, spell_amount
from ariary_words.word_to_number import words_to_amount

load_dotenv()


# ─── Reference Amounts ───────────────────────────────────────────────

SAMPLE_AMOUNTS: list[float] = [
    0, 1, 15, 21, 70, 71, 80, 81, 90, 91, 99, 100, 101, 200, 1000, 1001, 1100,
    2000, 10000, 21000, 100000, 1000000, 1234567,
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Argument Parsing ────────────────────────────────────────────────


def _parse_amounts(args: list[str]) -> tuple[list[float], list[str]]:
    """Split command-line arguments into amounts and rejected arguments."""
    amounts: list[float] = []
    rejected: list[str] = []
    for arg in args:
        try:
            amounts.append(float(arg.replace(" ", "").replace(",", ".")))
        except ValueError:
            rejected.append(arg)
    return amounts, rejected


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_listing(amounts: list[float]) -> int:
    """Print each amount with its words and a read-back check.

    Returns:
        Number of amounts whose words did not read back to the rounded figure.
    """
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  AMOUNT IN WORDS (ARIARY){_RESET}")
    print(f"{'=' * _WIDTH}")

    mismatches = 0
    for amount in amounts:
        result = spell_amount(amount)
        if not result.is_valid:
            print(f"  {amount:>14,.2f}  {_YELLOW}{INVALID_AMOUNT}{_RESET} {_DIM}[{result.error_code}]{_RESET}")
            continue

        read_back = words_to_amount(result.words)
        if read_back == result.rounded:
            mark = f"{_GREEN}ok{_RESET}"
        else:
            mark = f"{_RED}read back {read_back:,}{_RESET}"
            mismatches += 1
        print(f"  {amount:>14,.2f}  {result.words}  {_DIM}({mark}{_DIM}){_RESET}")

    print(f"{'─' * _WIDTH}")
    if amounts:
        print(f"  {format_amount_in_words(amounts[-1])}")
    print(f"{'=' * _WIDTH}\n")
    return mismatches


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Spell the requested (or reference) amounts."""
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())

    amounts, rejected = _parse_amounts(sys.argv[1:])
    for arg in rejected:
        print(f"  {_RED}Not a number: {arg!r}{_RESET}")
    if not sys.argv[1:]:
        amounts = SAMPLE_AMOUNTS

    mismatches = print_listing(amounts)
    sys.exit(1 if mismatches or rejected else 0)


if __name__ == "__main__":
    main()
