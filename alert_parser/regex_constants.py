import re

# Money coming in. "credit card" is deliberately not covered: only inflow verbs.
CREDIT_PATTERN = re.compile(
    r"\b(?:credited|received|deposit(?:ed)?|refund(?:ed)?|cashback|rewards?|salary|reversal|reversed)\b",
    re.IGNORECASE,
)
CREDIT_PHRASE_PATTERN = re.compile(
    r"\bamount\b.*?\bcredited\b|\btransfer\b.*?\breceived\b|\breceived\b.*?\bfrom\b",
    re.IGNORECASE | re.DOTALL,
)
# Unambiguous outflow verbs; these override any credit vocabulary.
STRONG_DEBIT_PATTERN = re.compile(r"\b(?:debited|spent|charged|withdrawn)\b", re.IGNORECASE)
DEBIT_PATTERN = re.compile(
    r"\b(?:debited|debit|spent|charged|withdrawn|withdrawal|purchased?|paid|payment\s+of|sent)\b",
    re.IGNORECASE,
)
WHITESPACE_PATTERN = re.compile(r"\s+")
NUMERIC_DMY_PATTERN = re.compile(r"^(\d{1,2})[-/](\d{1,2})[-/](\d{2,4})$")
NUMERIC_YMD_PATTERN = re.compile(r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})$")
AMOUNT_NUMBER_PATTERN = re.compile(r"[0-9][0-9,]*(?:\.[0-9]+)?")
