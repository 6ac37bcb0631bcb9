from alert_parser.merchant_normalizer import clean_merchant_name, is_valid_merchant_name


def test_alias_after_upi_prefix():
    assert clean_merchant_name("UPI_ZEPTONOW") == "Zepto"


def test_corporate_suffixes_are_removed():
    assert clean_merchant_name("BIG BAZAAR PVT LTD") == "Big Bazaar"
    assert clean_merchant_name("SWIGGY PVT LTD") == "Swiggy"
    assert clean_merchant_name("AMAZON BD") == "Amazon"


def test_separators_and_case():
    assert clean_merchant_name("  MORE_RETAIL-STORES  ") == "More Retail Stores"
    assert clean_merchant_name("croma!!") == "Croma"


def test_validation():
    assert is_valid_merchant_name("Swiggy")
    assert not is_valid_merchant_name("")
    assert not is_valid_merchant_name("A")
    assert not is_valid_merchant_name("12345")
    assert not is_valid_merchant_name("9Shop")
    assert not is_valid_merchant_name("Payment")
    assert not is_valid_merchant_name("UPI")
