"""
Ariary Words — French amount-in-words for Madagascar point-of-sale receipts.

Architecture: Validate & round → Scale decomposition → 0–999 / 0–99 converters → Phrase
Philosophy:  A receipt must always render. Bad input degrades to a visible sentinel.
"""

__version__ = "1.0.0"
