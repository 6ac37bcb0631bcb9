from typing import Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict


class ExpenseBase(BaseModel):
    amount: Decimal
    merchant: str
    category: str
    date: datetime
    payment_method: str
    notes: Optional[str] = None


class ExpenseCreate(ExpenseBase):
    source: str = "manual"
    email_id: Optional[str] = None


class ExpenseResponse(ExpenseCreate):
    id: str
    user_id: str

    model_config = ConfigDict(from_attributes=True)
