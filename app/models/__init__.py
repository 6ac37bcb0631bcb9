from app.db import Base
from app.models.bank_pattern import BankPattern
from app.models.category import Category
from app.models.expense import Expense
from app.models.processed_email import ProcessedEmail

__all__ = [
    "Base",
    "BankPattern",
    "Category",
    "Expense",
    "ProcessedEmail",
]
