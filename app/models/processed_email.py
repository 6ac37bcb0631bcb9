import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.dialects.postgresql import UUID
from app.db import Base


class ProcessedEmail(Base):
    """Mailbox message ids that have already been through the parser"""
    __tablename__ = "processed_emails"

    id = Column(UUID(as_uuid=False), primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    email_id = Column(String, nullable=False, unique=True, index=True)
    processed_at = Column(DateTime, default=datetime.utcnow, nullable=False)
