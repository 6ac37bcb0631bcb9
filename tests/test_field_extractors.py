import json
from datetime import datetime

import pytest

from alert_parser.field_extractors import (
    candidate_patterns,
    extract_amount,
    extract_date,
    extract_merchant,
    extract_payment_method,
    normalize_amount,
    parse_date_string,
)
from alert_parser import EmailParser
from alert_parser.models import BankPattern


@pytest.mark.parametrize("text", ["Rs. 1,250.00 debited", "INR1250 debited", "₹1250 spent"])
def test_amount_is_normalized(text):
    assert extract_amount(text) == "1250.00"


def test_amount_missing():
    assert extract_amount("Your OTP is ready") is None


def test_normalize_amount():
    assert normalize_amount("1,00,000") == "100000.00"
    assert normalize_amount("12.5") == "12.50"
    assert normalize_amount("n/a") is None


def test_bank_patterns_are_tried_before_defaults():
    bank = BankPattern("Test Bank", "testbank", amount_patterns=r'["/AMT\\s*([0-9.]+)/i"]')
    assert extract_amount("AMT 42.00 then Rs. 999", [bank]) == "42.00"
    assert extract_amount("AMT 42.00 then Rs. 999") == "999.00"


def test_candidate_patterns_end_with_defaults():
    bank = BankPattern("Test Bank", "testbank", merchant_patterns='["/shop\\\\s+(\\\\w+)/i"]')
    specs = candidate_patterns("merchant", [bank])
    assert specs[0].pattern == r"shop\s+(\w+)"
    assert len(specs) > 1


@pytest.mark.parametrize("text, merchant", [
    ("Merchant Name: BIG BAZAAR PVT LTD on 02-03-2024", "Big Bazaar"),
    ("UPI/P2M/412345678901/ZEPTONOW/Payment", "Zepto"),
    ("Rs 450 spent on your card ending 4321 at Starbucks on 01-02-2024", "Starbucks"),
    ("Rs 200 paid to Ramesh Kumar.", "Ramesh Kumar"),
    ("Rs 99 debited to VPA swiggy@icici", "Swiggy"),
])
def test_merchant_extraction(text, merchant):
    assert extract_merchant(text) == merchant


def test_merchant_text_is_whitespace_normalized():
    assert extract_merchant("Merchant:\n   Cafe\n   Coffee Day.") == "Cafe Coffee Day"


def test_merchant_fallback_battery():
    assert extract_merchant("Beneficiary Acme #4411") == "Acme"


def test_merchant_missing():
    assert extract_merchant("Rs. 500.00 debited from your account") is None


def test_day_first_dates():
    assert parse_date_string("05-03-2024") == datetime(2024, 3, 5)
    assert parse_date_string("05/03/24") == datetime(2024, 3, 5)


def test_month_first_when_configured():
    assert parse_date_string("05-03-2024", day_first=False) == datetime(2024, 5, 3)


def test_other_date_formats():
    assert parse_date_string("15 Jan 2024") == datetime(2024, 1, 15)
    assert parse_date_string("2024-03-05") == datetime(2024, 3, 5)


@pytest.mark.parametrize("raw", ["15-01-1999", "31-02-2024", "01-01-75", ""])
def test_implausible_or_invalid_dates(raw):
    assert parse_date_string(raw) is None


def test_extract_date():
    assert extract_date("Txn on 15 Jan 2024 at 10:15") == datetime(2024, 1, 15)
    assert extract_date("Date: 15-01-2024") == datetime(2024, 1, 15)
    assert extract_date("Date: 15-01-1999") is None


@pytest.mark.parametrize("text, label", [
    ("Rs 10 paid via UPI", "UPI"),
    ("Payment Mode: Net Banking", "Net Banking"),
    ("spent on your Debit Card", "Debit Card"),
    ("spent on your Credit Card", "Credit Card"),
    ("ref UPI123 debited", "UPI"),
    ("card ending 1234", "Card"),
    ("Rs 10 debited", "Other"),
])
def test_payment_method(text, label):
    assert extract_payment_method(text) == label


@pytest.mark.parametrize("raw", ["2024", "Jan 2024", "15 Jan"])
def test_incomplete_textual_dates_are_rejected(raw):
    assert parse_date_string(raw) is None


def test_partial_date_capture_falls_back_to_email_date():
    bank = BankPattern("Test Bank", "testbank", date_patterns=json.dumps([r"/in (\d{4})/i"]))
    delivered = datetime(2024, 6, 1, 9, 30)
    parsed = EmailParser().parse_with_config(
        "Alert", "Rs. 80 paid to Chai Point. Billed in 2024", "alerts@testbank.com", [bank], email_date=delivered
    )
    assert parsed.date == delivered


def test_currency_marker_must_start_a_word():
    assert extract_amount("Valid for 24 hours 500 paid to X") is None
    assert extract_amount("Valid for 24 hours, Rs. 500 paid to X") == "500.00"
