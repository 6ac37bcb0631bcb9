from app.schemas.bank_pattern import BankPatternCreate
from app.schemas.category import CategoryCreate
from app.schemas.expense import ExpenseCreate, ExpenseResponse
from app.schemas.email import ParseEmailRequest, ParseEmailResponse, InboundEmail

__all__ = [
    "BankPatternCreate",
    "CategoryCreate",
    "ExpenseCreate",
    "ExpenseResponse",
    "ParseEmailRequest",
    "ParseEmailResponse",
    "InboundEmail",
]
