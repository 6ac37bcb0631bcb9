"""
Merchant name cleanup and validation.
"""

import re
import string

from .defaults import INVALID_MERCHANT_NAMES, MERCHANT_ALIASES

UPI_PREFIX = re.compile(r"^UPI_", re.IGNORECASE)
CORPORATE_SUFFIX = re.compile(
    r"\s+(?:PAYMENTS?|PVT\.?\s*LTD\.?|PRIVATE\s+LIMITED|LIMITED|LTD\.?|INDIA|SERVICES?|BD)\s*$",
    re.IGNORECASE,
)
SEPARATORS = re.compile(r"[_-]+")
DISALLOWED_CHARS = re.compile(r"[^\w\s&'.-]")
WHITESPACE = re.compile(r"\s+")


def _alias(name: str):
    return MERCHANT_ALIASES.get(WHITESPACE.sub(" ", name).strip().upper())


def clean_merchant_name(raw: str) -> str:
    """
    Turn a raw captured substring into a display name.

    Example:
        "UPI_ZEPTONOW" -> "Zepto", "BIG BAZAAR PVT LTD" -> "Big Bazaar"
    """
    merchant = UPI_PREFIX.sub("", (raw or "").strip())

    alias = _alias(merchant)
    if alias:
        return alias

    previous = None
    while previous != merchant:
        previous = merchant
        merchant = CORPORATE_SUFFIX.sub("", merchant)

    merchant = SEPARATORS.sub(" ", merchant)
    merchant = DISALLOWED_CHARS.sub("", merchant)
    merchant = WHITESPACE.sub(" ", merchant).strip(" .'&")

    # Suffix stripping can expose an alias ("SWIGGY PVT LTD" -> "SWIGGY")
    alias = _alias(merchant)
    if alias:
        return alias

    return string.capwords(merchant.lower())


def is_valid_merchant_name(merchant: str) -> bool:
    """Reject empty, numeric, non-alphabetic-leading and boilerplate names"""
    if not merchant or len(merchant) < 2:
        return False
    if merchant.isdigit():
        return False
    if not merchant[0].isascii() or not merchant[0].isalpha():
        return False
    if merchant.upper() in INVALID_MERCHANT_NAMES:
        return False
    return True
