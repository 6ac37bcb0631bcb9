import uuid

import pytest

from alert_parser import BankPattern, CategoryRule, EmailParser
from alert_parser.defaults import DEFAULT_BANK_PATTERNS, default_categories


class InMemoryStorage:
    """Storage double keeping everything in lists"""

    def __init__(self, bank_patterns=None, categories=None):
        self.bank_patterns = list(bank_patterns or [])
        self.categories = list(categories or [])
        self.expenses = []
        self.processed = set()
        self.fail_on_create = False

    async def get_bank_patterns(self):
        return list(self.bank_patterns)

    async def get_categories(self):
        return list(self.categories)

    async def create_expense(self, expense, user_id):
        if self.fail_on_create:
            raise RuntimeError("database unavailable")
        row = {**expense, "id": str(uuid.uuid4()), "user_id": user_id}
        self.expenses.append(row)
        return row

    async def is_email_processed(self, email_id):
        return email_id in self.processed

    async def mark_email_as_processed(self, email_id):
        self.processed.add(email_id)


@pytest.fixture
def empty_storage():
    return InMemoryStorage()


@pytest.fixture
def seeded_storage():
    return InMemoryStorage(
        bank_patterns=[BankPattern.from_record(r) for r in DEFAULT_BANK_PATTERNS],
        categories=[CategoryRule.from_record(r) for r in default_categories()],
    )


@pytest.fixture
def parser(seeded_storage):
    return EmailParser(seeded_storage)


@pytest.fixture
def swiggy_alert():
    return {
        "sender": "alerts@hdfcbank.com",
        "subject": "Transaction Alert: Rs. 1,250.00 debited",
        "body": "Dear Customer,\nMerchant: Swiggy\nPayment Mode: UPI\nDate: 15-01-2024\nThank you for banking with us.",
    }


@pytest.fixture
def card_alert():
    return {
        "sender": "credit_cards@icicibank.com",
        "subject": "Transaction alert for your ICICI Bank Credit Card",
        "body": "INR 750.00 spent on your ICICI Bank Credit Card ending 1234 at Amazon on 12-02-2024. Earn cashback on your next purchase.",
    }


@pytest.fixture
def salary_alert():
    return {
        "sender": "alerts@hdfcbank.com",
        "subject": "Account update",
        "body": "INR 5,000.00 credited to your account as salary",
    }
