import json

from alert_parser.categorizer import categorize
from alert_parser.models import CategoryRule


def test_unknown_merchant_falls_back_to_other():
    assert categorize("Unknown Shop", "Rs. 100 debited") == "Other"


def test_builtin_keywords():
    assert categorize("Swiggy", "") == "Food & Dining"
    assert categorize("Uber India", "") == "Transport"
    assert categorize("Acme", "paid for netflix subscription") == "Entertainment"


def test_configured_categories_win_in_stored_order():
    rules = [
        CategoryRule("Work Lunch", json.dumps(["swiggy"])),
        CategoryRule("Food & Dining", json.dumps(["swiggy", "zomato"])),
    ]
    assert categorize("Swiggy", "", rules) == "Work Lunch"


def test_inactive_and_malformed_categories_are_skipped():
    rules = [
        CategoryRule("Disabled", json.dumps(["swiggy"]), is_active="false"),
        CategoryRule("Broken", "{not json"),
    ]
    assert categorize("Swiggy", "", rules) == "Food & Dining"


def test_keywords_are_case_insensitive():
    rules = [CategoryRule("Fitness", json.dumps(["CultFit"]))]
    assert categorize("CULTFIT Gym", "", rules) == "Fitness"
