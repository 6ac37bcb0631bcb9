"""
Email Parser for bank transaction alerts.
Turns alert email text (sender, subject, body) into a structured expense using
configurable bank patterns and category keywords, falling back to the
built-in defaults.
"""

from dataclasses import dataclass
from datetime import datetime
import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol

from .categorizer import categorize
from .field_extractors import extract_amount, extract_date, extract_merchant, extract_payment_method
from .models import BankPattern, CategoryRule
from .options import ParserOptions
from .sender_classifier import is_bank_sender, matching_patterns
from .transaction_classifier import is_credit

logger = logging.getLogger(__name__)


class PatternSource(Protocol):
    """The part of the storage layer the parser reads"""

    async def get_bank_patterns(self) -> List[Any]:
        ...

    async def get_categories(self) -> List[Any]:
        ...


@dataclass
class ParsedTransaction:
    """Data class representing a parsed debit transaction"""
    amount: str
    merchant: str
    date: datetime
    category: str
    payment_method: str

    def to_dict(self):
        """Convert transaction to dictionary"""
        return {
            "amount": self.amount,
            "merchant": self.merchant,
            "date": self.date.isoformat(),
            "category": self.category,
            "payment_method": self.payment_method,
        }


def _as_bank_patterns(records: Iterable[Any]) -> List[BankPattern]:
    return [r if isinstance(r, BankPattern) else BankPattern.from_record(r) for r in records or []]


def _as_category_rules(records: Iterable[Any]) -> List[CategoryRule]:
    return [r if isinstance(r, CategoryRule) else CategoryRule.from_record(r) for r in records or []]


class EmailParser:
    """Rule driven parser for bank alert emails"""

    def __init__(self, storage: Optional[PatternSource] = None, options: Optional[ParserOptions] = None):
        """
        Args:
            storage: Source of bank patterns and categories, re-read on every
                parse. Without one only the built-in defaults are used.
            options: Matching limits and date / merchant policies
        """
        self.storage = storage
        self.options = options or ParserOptions()

    async def parse_email(
        self,
        subject: str,
        body: str,
        sender: str,
        email_date: Optional[datetime] = None,
    ) -> Optional[ParsedTransaction]:
        """
        Parse an alert email into a debit transaction.

        Args:
            subject: Subject line of the email
            body: Body content of the email
            sender: Sender address
            email_date: Delivery timestamp of the email, if known

        Returns:
            ParsedTransaction, or None when the email is not a recognised
            debit alert or a mandatory field is missing
        """
        bank_patterns: List[Any] = []
        categories: List[Any] = []
        if self.storage is not None:
            bank_patterns = await self.storage.get_bank_patterns()
            categories = await self.storage.get_categories()
        return self.parse_with_config(subject, body, sender, bank_patterns, categories, email_date)

    def parse_with_config(
        self,
        subject: str,
        body: str,
        sender: str,
        bank_patterns: Iterable[Any] = (),
        categories: Iterable[Any] = (),
        email_date: Optional[datetime] = None,
    ) -> Optional[ParsedTransaction]:
        """Parse against already-fetched configuration. Pure and synchronous."""
        banks = _as_bank_patterns(bank_patterns)

        if not is_bank_sender(sender, banks):
            logger.debug(f"Ignoring email from unrecognised sender {sender!r}")
            return None

        text = f"{subject or ''} {body or ''}"
        if len(text) > self.options.max_text_length:
            logger.debug(f"Truncating alert text from {len(text)} to {self.options.max_text_length} characters")
            text = text[:self.options.max_text_length]

        if is_credit(text):
            logger.debug("Skipping credit transaction")
            return None

        sender_banks = matching_patterns(sender, banks)
        timeout = self.options.regex_timeout

        amount = extract_amount(text, sender_banks, timeout)
        merchant = extract_merchant(text, sender_banks, timeout)
        transaction_date = extract_date(text, sender_banks, timeout, day_first=self.options.day_first)

        if amount is None:
            logger.debug("No amount found in alert")
            return None
        if merchant is None:
            if not self.options.unknown_merchant_placeholder:
                logger.debug("No merchant found in alert")
                return None
            merchant = self.options.unknown_merchant_placeholder

        category = categorize(merchant, text, _as_category_rules(categories))
        payment_method = extract_payment_method(text, sender_banks, timeout)

        # Date in the alert body wins over delivery time, which wins over now
        final_date = transaction_date or email_date or datetime.now()

        return ParsedTransaction(
            amount=amount,
            merchant=merchant,
            date=final_date,
            category=category,
            payment_method=payment_method,
        )

    @staticmethod
    def to_expense(parsed: ParsedTransaction) -> Dict[str, Any]:
        """Map a parsed transaction to expense fields"""
        return {
            "amount": parsed.amount,
            "merchant": parsed.merchant,
            "category": parsed.category,
            "date": parsed.date,
            "payment_method": parsed.payment_method,
            "notes": None,
        }
