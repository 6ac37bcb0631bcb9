import uuid
from sqlalchemy import Column, String, DateTime, Numeric, func
from sqlalchemy.dialects.postgresql import UUID
from app.db import Base


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id = Column(String, nullable=False, index=True)
    amount = Column(Numeric(precision=10, scale=2), nullable=False)
    merchant = Column(String, nullable=False)
    category = Column(String, nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    payment_method = Column(String, nullable=False)
    notes = Column(String, nullable=True)
    source = Column(String, nullable=False, default="manual")
    email_id = Column(String, nullable=True, index=True)
