"""
Built-in default configuration.

This is the single copy of the default rules: the parser falls back to these
lists when the pattern store has nothing active, and the seeding script
writes the same lists into the store as the initial bank patterns and
categories.
"""

import json
from typing import Dict, List

# Shared fragments for merchant rules: a lazily matched name followed by a
# word or punctuation that usually ends it in alert text.
_NAME = r"([A-Za-z][A-Za-z0-9\s&'._-]{1,30}?)"
_NAME_END = (
    r"(?=\s+(?:on|at|dated|for|via|using|with|ref|upi|payment|mode|date|txn|"
    r"transaction|card|avl|available|info|is|has|from|and)\b|\s*[.,;:|(]|\s*$)"
)
_MONTHS = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*"
_DATE_LEAD = r"\b(?:on|dated?|transaction\s+date|txn\s+date)\s*[:\-]?\s*"
_AMOUNT = r"([0-9][0-9,]*(?:\.[0-9]{1,2})?)"

AMOUNT_PATTERNS: List[str] = [
    r"/(?<![A-Za-z])(?:INR|Rs\.?|₹)\s*" + _AMOUNT + "/i",
    r"/\b(?:debited|spent|payment|transaction)\s+(?:of\s+)?(?:INR|Rs\.?|₹)?\s*" + _AMOUNT + "/i",
    r"/\bamount\s*:?\s*(?:INR|Rs\.?|₹)?\s*" + _AMOUNT + "/i",
    r"/(?<![A-Za-z])(?:USD|\$)\s*" + _AMOUNT + "/i",
]

# Ordered from the most specific label to the most generic phrasing.
MERCHANT_PATTERNS: List[str] = [
    r"/\bmerchant\s+name\s*[:\-]?\s*" + _NAME + _NAME_END + "/i",
    r"/UPI\/P2[MP]\/\d+\/([A-Za-z][A-Za-z0-9\s&'._-]{1,30}?)(?=\/|\s|$)/i",
    r"/\b(?:spent|charged|used)\b.*?\b(?:card|ending)\b.*?\b(?:at|with)\s+" + _NAME + _NAME_END + "/i",
    r"/\bhas\s+been\s+spent\b.*?\bat\s+" + _NAME + _NAME_END + "/i",
    r"/\btransaction\s+info\s*[:\-]?\s*" + _NAME + _NAME_END + "/i",
    r"/\bUPI\S*?\/([A-Za-z][A-Za-z\s&'.-]{2,30}?)(?=\/|\s|$)/i",
    r"/\b(?:merchant|payee)\b(?!\s+name)\s*[:\-]?\s*" + _NAME + _NAME_END + "/i",
    r"/\b(?:payment|paid|debited|sent)\s+(?:at|to)\s+(?:VPA\s+)?" + _NAME + _NAME_END + "/i",
    r"/\bto\s+VPA\s+([A-Za-z][A-Za-z0-9._-]{1,30})@/i",
    r"/\b(?:card|used)\s+at\s+" + _NAME + _NAME_END + "/i",
    r"/\bbeneficiary(?:\s+name)?\s*[:\-]?\s*" + _NAME + _NAME_END + "/i",
]

# Looser label-style rules tried only when everything above failed.
MERCHANT_FALLBACK_PATTERNS: List[str] = [
    r"/\bpayee(?:\s+name)?\s*[:\-]?\s*" + _NAME + r"(?=\s|$)/i",
    r"/\bbeneficiary(?:\s+name)?\s*[:\-]?\s*" + _NAME + r"(?=\s|$)/i",
    r"/\bmerchant\s+name\s*[:\-]?\s*" + _NAME + r"(?=\s|$)/i",
    r"/\bto\s*:?\s+([A-Za-z][A-Za-z\s&'.-]{2,30}?)(?=\s+(?:on|dated)\b|\s*[.,]|\s*$)/i",
]

DATE_PATTERNS: List[str] = [
    r"/" + _DATE_LEAD + r"(\d{1,2}[-/]\d{1,2}[-/]\d{2,4})\b/i",
    r"/" + _DATE_LEAD + r"(\d{1,2}[-\s]" + _MONTHS + r"[-\s,]+\d{2,4})\b/i",
    r"/" + _DATE_LEAD + r"(\d{4}[-/]\d{1,2}[-/]\d{1,2})\b/i",
    r"/(\d{1,2}[-/]\d{1,2}[-/]\d{4})\s+(?:at\b|\d{1,2}:)/i",
    r"/(\d{1,2}\s+" + _MONTHS + r"\s+\d{4})\s+(?:at\b|\d{1,2}:)/i",
]

PAYMENT_METHOD_PATTERNS: List[str] = [
    r"/\b(?:using|via|through|card)\s+(credit\s+card|debit\s+card|upi|net\s*banking|wallet)\b/i",
    r"/\b(?:payment\s+mode|mode\s+of\s+payment|payment\s+method|paid\s+via)\s*[:\-]?\s*(credit\s+card|debit\s+card|upi|net\s*banking|wallet|card)\b/i",
    r"/\b(credit\s+card|debit\s+card)\b/i",
]

DEFAULT_PATTERN_SET: Dict[str, List[str]] = {
    "amount": AMOUNT_PATTERNS,
    "merchant": MERCHANT_PATTERNS,
    "date": DATE_PATTERNS,
    "payment_method": PAYMENT_METHOD_PATTERNS,
}

# Sender substrings recognised when no bank pattern is active.
FALLBACK_BANK_DOMAINS: List[str] = [
    "hdfcbank",
    "icicibank",
    "sbi",
    "axisbank",
    "yesbank",
    "kotak",
    "indusind",
    "pnb",
    "bob",
    "bankofindia",
    "idfcfirstbank",
    "federalbank",
    "paytm",
    "phonepe",
    "gpay",
    "paypal",
    "stripe",
    "razorpay",
    "alerts",
    "notification",
    "banking",
]

DEFAULT_CATEGORY_KEYWORDS: Dict[str, List[str]] = {
    "Food & Dining": ["swiggy", "zomato", "restaurant", "cafe", "food", "dining", "burger", "pizza", "dominos", "mcdonald", "kfc", "subway"],
    "Transport": ["uber", "ola", "rapido", "metro", "fuel", "petrol", "diesel", "parking", "taxi", "cab"],
    "Shopping": ["amazon", "flipkart", "myntra", "ajio", "shopping", "mall", "store", "retail"],
    "Bills & Utilities": ["electricity", "water", "gas", "broadband", "mobile", "recharge", "bill payment", "utility"],
    "Entertainment": ["netflix", "prime", "hotstar", "spotify", "movie", "pvr", "inox", "cinema", "theatre"],
    "Healthcare": ["pharmacy", "hospital", "doctor", "medical", "medicine", "clinic", "apollo", "medplus"],
    "Groceries": ["bigbasket", "grofers", "blinkit", "grocery", "supermarket", "dmart", "zepto", "instamart"],
    "Other": ["miscellaneous", "general"],
}

# Display metadata for the seeded categories.
CATEGORY_STYLES: Dict[str, Dict[str, str]] = {
    "Food & Dining": {"icon": "🍔", "color": "#ef4444"},
    "Transport": {"icon": "🚗", "color": "#f59e0b"},
    "Shopping": {"icon": "🛍️", "color": "#8b5cf6"},
    "Bills & Utilities": {"icon": "💡", "color": "#06b6d4"},
    "Entertainment": {"icon": "🎬", "color": "#ec4899"},
    "Healthcare": {"icon": "🏥", "color": "#10b981"},
    "Groceries": {"icon": "🛒", "color": "#22c55e"},
    "Other": {"icon": "📦", "color": "#6b7280"},
}

FALLBACK_CATEGORY = "Other"

MERCHANT_ALIASES: Dict[str, str] = {
    "AMAZON BD": "Amazon",
    "AMAZON PAY": "Amazon",
    "FLIPKART PAYMENTS": "Flipkart",
    "ZEPTONOW": "Zepto",
    "SWIGGY": "Swiggy",
    "SWIGGY INSTAMART": "Instamart",
    "ZOMATO": "Zomato",
    "PAYTM": "Paytm",
    "PHONEPE": "PhonePe",
    "GPAY": "Google Pay",
    "BUNDL TECHNOLOGIES": "Swiggy",
    "BIGBASKET": "BigBasket",
}

# Boilerplate words that greedy rules sometimes capture as a merchant.
INVALID_MERCHANT_NAMES = frozenset({
    "TRANSACTION", "PAYMENT", "DEBIT", "CREDIT", "ACCOUNT", "BANK",
    "UPI", "NEFT", "RTGS", "IMPS", "INFO", "DETAILS", "SUMMARY",
    "DATE", "TIME", "AMOUNT", "BALANCE", "AVAILABLE", "TOTAL",
    "YOUR", "CARD", "NAME", "MODE", "VPA", "REF",
})


def _bank(bank_name: str, domain: str, amount=None, merchant=None, date=None, payment_method=None) -> Dict[str, str]:
    return {
        "bank_name": bank_name,
        "domain": domain,
        "amount_patterns": json.dumps(amount if amount is not None else AMOUNT_PATTERNS),
        "merchant_patterns": json.dumps(merchant if merchant is not None else MERCHANT_PATTERNS),
        "date_patterns": json.dumps(date if date is not None else DATE_PATTERNS),
        "payment_method_patterns": json.dumps(payment_method if payment_method is not None else PAYMENT_METHOD_PATTERNS),
        "is_active": "true",
    }


# Seed records for the pattern store, in stored encoding.
DEFAULT_BANK_PATTERNS: List[Dict[str, str]] = [
    _bank("HDFC Bank", "hdfcbank"),
    _bank("ICICI Bank", "icicibank"),
    _bank("State Bank of India", "sbi", amount=AMOUNT_PATTERNS[:2], date=DATE_PATTERNS[:3]),
    _bank("Axis Bank", "axisbank", amount=[AMOUNT_PATTERNS[0], AMOUNT_PATTERNS[2]]),
    _bank("Kotak Mahindra Bank", "kotak", amount=AMOUNT_PATTERNS[:2], date=DATE_PATTERNS[:1]),
]


def default_categories() -> List[Dict[str, str]]:
    """Seed records for the category store, in stored encoding"""
    return [
        {
            "name": name,
            "icon": CATEGORY_STYLES[name]["icon"],
            "color": CATEGORY_STYLES[name]["color"],
            "keywords": json.dumps(keywords),
            "is_active": "true",
        }
        for name, keywords in DEFAULT_CATEGORY_KEYWORDS.items()
    ]
