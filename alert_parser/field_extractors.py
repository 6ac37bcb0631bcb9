"""
Field extractors for amount, merchant, date and payment method.

Every extractor walks an ordered list of PatternSpec rules (configured bank
patterns first, built-in defaults after) and returns the first structurally
valid value. None of them raise on bad input or bad configuration.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
import logging
from typing import Iterable, List, Optional, Sequence

from dateutil import parser as date_parser

from .defaults import DEFAULT_PATTERN_SET, MERCHANT_FALLBACK_PATTERNS
from .merchant_normalizer import clean_merchant_name, is_valid_merchant_name
from .models import BankPattern
from .pattern_compiler import PatternSpec, captured_value, load_patterns, safe_search
from .regex_constants import (
    AMOUNT_NUMBER_PATTERN,
    NUMERIC_DMY_PATTERN,
    NUMERIC_YMD_PATTERN,
    WHITESPACE_PATTERN,
)

logger = logging.getLogger(__name__)

MIN_PLAUSIBLE_YEAR = 2020
TWO_DIGIT_YEAR_PIVOT = 50
_FILL_A = datetime(MIN_PLAUSIBLE_YEAR, 1, 1)
_FILL_B = datetime(MIN_PLAUSIBLE_YEAR + 1, 2, 2)
CENTS = Decimal("0.01")

PAYMENT_METHOD_LABELS = (
    ("credit", "Credit Card"),
    ("debit", "Debit Card"),
    ("upi", "UPI"),
    ("net banking", "Net Banking"),
    ("netbanking", "Net Banking"),
    ("wallet", "Wallet"),
    ("card", "Card"),
)

DEFAULT_PAYMENT_METHOD = "Other"

_DEFAULT_SPECS = {field: load_patterns(patterns, label=f"default.{field}") for field, patterns in DEFAULT_PATTERN_SET.items()}
_MERCHANT_FALLBACK_SPECS = load_patterns(MERCHANT_FALLBACK_PATTERNS, label="default.merchant_fallback")


def candidate_patterns(field: str, bank_patterns: Iterable[BankPattern]) -> List[PatternSpec]:
    """Configured rules for a field, in bank order, followed by the defaults"""
    specs: List[PatternSpec] = []
    for bank_pattern in bank_patterns:
        specs.extend(bank_pattern.patterns_for(field))
    specs.extend(_DEFAULT_SPECS[field])
    return specs


def _iter_values(specs: Sequence[PatternSpec], text: str, timeout: Optional[float]):
    for spec in specs:
        value = captured_value(safe_search(spec, text, timeout))
        if value:
            yield spec, value


def normalize_amount(raw: str) -> Optional[str]:
    """
    Strip thousands separators and render with two decimals.

    Example:
        "1,250" -> "1250.00"
    """
    number = AMOUNT_NUMBER_PATTERN.search(raw or "")
    if not number:
        return None
    try:
        value = Decimal(number.group(0).replace(",", "")).quantize(CENTS)
    except InvalidOperation:
        return None
    return str(value)


def extract_amount(text: str, bank_patterns: Iterable[BankPattern] = (), timeout: Optional[float] = None) -> Optional[str]:
    for spec, value in _iter_values(candidate_patterns("amount", bank_patterns), text, timeout):
        amount = normalize_amount(value)
        if amount is not None:
            return amount
    return None


def _first_valid_merchant(specs: Sequence[PatternSpec], text: str, timeout: Optional[float]) -> Optional[str]:
    for spec, value in _iter_values(specs, text, timeout):
        merchant = clean_merchant_name(value)
        if is_valid_merchant_name(merchant):
            return merchant
        logger.debug(f"Rejected merchant candidate {value!r} from {spec.to_notation()}")
    return None


def extract_merchant(text: str, bank_patterns: Iterable[BankPattern] = (), timeout: Optional[float] = None) -> Optional[str]:
    """
    Find and normalize the merchant name.

    Alert bodies are often hard-wrapped or flattened from HTML, so whitespace
    is collapsed before matching.
    """
    clean_text = WHITESPACE_PATTERN.sub(" ", text or "").strip()
    merchant = _first_valid_merchant(candidate_patterns("merchant", bank_patterns), clean_text, timeout)
    if merchant:
        return merchant
    return _first_valid_merchant(_MERCHANT_FALLBACK_SPECS, clean_text, timeout)


def _expand_year(year: int) -> int:
    if year < 100:
        return year + (2000 if year < TWO_DIGIT_YEAR_PIVOT else 1900)
    return year


def parse_date_string(raw: str, day_first: bool = True) -> Optional[datetime]:
    """
    Parse a captured date string.

    Numeric D-M-Y strings are read day-first (Indian convention) unless
    day_first is False. Captures missing a day, month or year are rejected. Dates before MIN_PLAUSIBLE_YEAR are rejected.
    """
    raw = (raw or "").strip()
    if not raw:
        return None

    parsed = None
    numeric = NUMERIC_DMY_PATTERN.match(raw)
    iso = NUMERIC_YMD_PATTERN.match(raw)
    try:
        if numeric:
            first, second, year = (int(part) for part in numeric.groups())
            day, month = (first, second) if day_first else (second, first)
            if len(numeric.group(3)) == 3:
                return None
            parsed = datetime(_expand_year(year), month, day)
        elif iso:
            year, month, day = (int(part) for part in iso.groups())
            parsed = datetime(year, month, day)
        else:
            parsed = date_parser.parse(raw, dayfirst=day_first, default=_FILL_A)
            # Parts missing from the capture would be filled from the default
            if parsed != date_parser.parse(raw, dayfirst=day_first, default=_FILL_B):
                logger.debug(f"Ignoring incomplete date {raw!r}")
                return None
    except (ValueError, OverflowError) as e:
        logger.debug(f"Could not parse date {raw!r}: {e}")
        return None

    if parsed.year < MIN_PLAUSIBLE_YEAR:
        logger.debug(f"Ignoring implausible date {raw!r}")
        return None
    return parsed


def extract_date(
    text: str,
    bank_patterns: Iterable[BankPattern] = (),
    timeout: Optional[float] = None,
    day_first: bool = True,
) -> Optional[datetime]:
    for spec, value in _iter_values(candidate_patterns("date", bank_patterns), text, timeout):
        parsed = parse_date_string(value, day_first=day_first)
        if parsed is not None:
            return parsed
    return None


def normalize_payment_method(token: str) -> Optional[str]:
    """Map a captured token to a payment method label by substring"""
    token = WHITESPACE_PATTERN.sub(" ", (token or "").lower())
    for needle, label in PAYMENT_METHOD_LABELS:
        if needle in token:
            return label
    return None


def extract_payment_method(text: str, bank_patterns: Iterable[BankPattern] = (), timeout: Optional[float] = None) -> str:
    for spec, value in _iter_values(candidate_patterns("payment_method", bank_patterns), text, timeout):
        label = normalize_payment_method(value)
        if label:
            return label

    lower_text = (text or "").lower()
    if "upi" in lower_text:
        return "UPI"
    if "card" in lower_text:
        return "Card"
    return DEFAULT_PAYMENT_METHOD
