import pytest

from alert_parser.transaction_classifier import is_credit, is_debit


@pytest.mark.parametrize("text", [
    "INR 5,000.00 credited to your account",
    "Refund of Rs. 299 processed",
    "You earned cashback of Rs. 50",
    "Salary for January",
])
def test_credit_vocabulary(text):
    assert is_credit(text)


def test_debit_verb_overrides_credit_words():
    text = "Rs. 750 spent on your Credit Card ending 1234 at Amazon. Earn cashback!"
    assert not is_credit(text)
    assert is_debit(text)


def test_credit_card_alone_is_not_a_credit():
    assert not is_credit("Your Credit Card statement is ready")


def test_debit_vocabulary():
    assert is_debit("Rs. 100 debited from your account")
    assert is_debit("Cash withdrawn at ATM")
    assert not is_debit("Your OTP is 1234")
    assert not is_debit("")
