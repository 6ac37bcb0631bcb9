"""
Debit / credit classification of alert text.
"""

from .regex_constants import (
    CREDIT_PATTERN,
    CREDIT_PHRASE_PATTERN,
    DEBIT_PATTERN,
    STRONG_DEBIT_PATTERN,
)


def is_debit(text: str) -> bool:
    """True when the text uses spending vocabulary (debited, spent, paid, ...)"""
    if not text:
        return False
    return bool(DEBIT_PATTERN.search(text))


def is_credit(text: str) -> bool:
    """
    True when the text describes money coming in.

    A strong debit verb always wins, so "spent on your credit card ... reward
    points earned" stays a debit.
    """
    if not text:
        return False
    if not (CREDIT_PATTERN.search(text) or CREDIT_PHRASE_PATTERN.search(text)):
        return False
    return not STRONG_DEBIT_PATTERN.search(text)
