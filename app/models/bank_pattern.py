import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.dialects.postgresql import UUID
from app.db import Base


class BankPattern(Base):
    __tablename__ = "bank_patterns"

    id = Column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    bank_name = Column(String, nullable=False, unique=True)
    domain = Column(String, nullable=False)
    # JSON arrays of "/pattern/flags" strings
    amount_patterns = Column(Text, nullable=False, default="[]")
    merchant_patterns = Column(Text, nullable=False, default="[]")
    date_patterns = Column(Text, nullable=False, default="[]")
    payment_method_patterns = Column(Text, nullable=False, default="[]")
    is_active = Column(String, nullable=False, default="true")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<BankPattern(bank_name={self.bank_name}, domain={self.domain}, is_active={self.is_active})>"
