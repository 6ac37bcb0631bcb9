from typing import Any, Dict, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class ParseEmailRequest(BaseModel):
    subject: str = ""
    body: str = ""
    sender: str
    email_date: Optional[datetime] = None


class InboundEmail(BaseModel):
    """A message as handed over by a mailbox client"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    subject: str = ""
    body: str = ""
    sender: str = Field(default="", alias="from")
    date: Optional[datetime] = None


class ParseEmailResponse(BaseModel):
    success: bool
    transaction: Optional[Dict[str, Any]] = None
    expense: Optional[Dict[str, Any]] = None
