"""
Keyword based category assignment.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .defaults import DEFAULT_CATEGORY_KEYWORDS, FALLBACK_CATEGORY
from .models import CategoryRule, active_only


def _first_match(rules: Iterable[Tuple[str, List[str]]], merchant: str, text: str) -> Optional[str]:
    for name, keywords in rules:
        for keyword in keywords:
            if keyword in merchant or keyword in text:
                return name
    return None


def categorize(
    merchant: str,
    text: str,
    categories: Iterable[CategoryRule] = (),
    fallback: Dict[str, List[str]] = DEFAULT_CATEGORY_KEYWORDS,
) -> str:
    """
    Map a merchant and the alert text to a category name.

    Active configured categories are checked in stored order, then the
    built-in keyword table. Matching is case-insensitive substring search.
    """
    merchant_lower = (merchant or "").lower()
    text_lower = (text or "").lower()

    configured = [(rule.name, rule.keyword_list()) for rule in active_only(categories)]
    match = _first_match(configured, merchant_lower, text_lower)
    if match:
        return match

    match = _first_match(fallback.items(), merchant_lower, text_lower)
    return match or FALLBACK_CATEGORY
