import asyncio

import pytest
from pydantic import ValidationError

from alert_parser.defaults import (
    CATEGORY_STYLES,
    DEFAULT_BANK_PATTERNS,
    DEFAULT_CATEGORY_KEYWORDS,
    DEFAULT_PATTERN_SET,
    MERCHANT_FALLBACK_PATTERNS,
    default_categories,
)
from alert_parser.pattern_compiler import validate_pattern_list
from app.models.bank_pattern import BankPattern as BankPatternRow
from app.models.category import Category
from app.schemas.bank_pattern import BankPatternCreate
from app.services.seed_defaults import seed_defaults


@pytest.mark.parametrize("field", sorted(DEFAULT_PATTERN_SET))
def test_default_patterns_compile(field):
    assert validate_pattern_list(DEFAULT_PATTERN_SET[field]) == []


def test_fallback_merchant_patterns_compile():
    assert validate_pattern_list(MERCHANT_FALLBACK_PATTERNS) == []


def test_seed_records_are_valid():
    for record in DEFAULT_BANK_PATTERNS:
        BankPatternCreate(**record)


def test_every_category_has_a_style():
    assert set(DEFAULT_CATEGORY_KEYWORDS) == set(CATEGORY_STYLES)
    assert [c["name"] for c in default_categories()][-1] == "Other"


def test_invalid_pattern_is_refused():
    with pytest.raises(ValidationError):
        BankPatternCreate(bank_name="Bad Bank", domain="badbank", amount_patterns='["/(oops/i"]')


def test_domain_is_normalized():
    record = BankPatternCreate(bank_name="My Bank", domain="  MyBank  ", is_active=False)
    assert record.domain == "mybank"
    assert record.is_active == "false"


class FakeResult:
    def __init__(self, values):
        self.values = values

    def scalars(self):
        return self

    def all(self):
        return self.values


class FakeSession:
    def __init__(self, category_names=(), bank_names=()):
        self.category_names = list(category_names)
        self.bank_names = list(bank_names)
        self.added = []
        self.committed = False

    async def execute(self, statement):
        entity = statement.column_descriptions[0]["entity"]
        return FakeResult(self.category_names if entity is Category else self.bank_names)

    def add(self, row):
        self.added.append(row)

    async def commit(self):
        self.committed = True


def test_seed_defaults_inserts_missing_rows():
    session = FakeSession(category_names=["Other"], bank_names=["HDFC Bank"])

    counts = asyncio.run(seed_defaults(session))

    assert counts == {
        "categories": len(DEFAULT_CATEGORY_KEYWORDS) - 1,
        "bank_patterns": len(DEFAULT_BANK_PATTERNS) - 1,
    }
    banks = [row.bank_name for row in session.added if isinstance(row, BankPatternRow)]
    assert "HDFC Bank" not in banks
    assert session.committed
