"""
Storage layer used by the email parser and the ingestion service.
"""
from typing import Any, Dict, List, Protocol

from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from alert_parser.models import BankPattern, CategoryRule
from app.models.bank_pattern import BankPattern as BankPatternRow
from app.models.category import Category
from app.models.expense import Expense
from app.models.processed_email import ProcessedEmail
from app.logging_config import get_logger

logger = get_logger(__name__)


class Storage(Protocol):
    async def get_bank_patterns(self) -> List[BankPattern]:
        ...

    async def get_categories(self) -> List[CategoryRule]:
        ...

    async def create_expense(self, expense: Dict[str, Any], user_id: str) -> Any:
        ...

    async def is_email_processed(self, email_id: str) -> bool:
        ...

    async def mark_email_as_processed(self, email_id: str) -> None:
        ...


class DatabaseStorage:
    """Storage backed by the SQLAlchemy async session factory"""

    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def get_bank_patterns(self) -> List[BankPattern]:
        async with self.session_factory() as session:
            rows = (await session.execute(
                select(BankPatternRow).order_by(BankPatternRow.created_at)
            )).scalars().all()
        return [BankPattern.from_record(row) for row in rows]

    async def get_categories(self) -> List[CategoryRule]:
        async with self.session_factory() as session:
            rows = (await session.execute(
                select(Category).order_by(Category.created_at)
            )).scalars().all()
        return [CategoryRule.from_record(row) for row in rows]

    async def create_expense(self, expense: Dict[str, Any], user_id: str) -> Expense:
        async with self.session_factory() as session:
            row = Expense(user_id=user_id, **expense)
            session.add(row)
            try:
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            await session.refresh(row)
            logger.info(f"Created expense {row.id} for user {user_id}")
            return row

    async def is_email_processed(self, email_id: str) -> bool:
        async with self.session_factory() as session:
            row = (await session.execute(
                select(ProcessedEmail.id).filter_by(email_id=email_id)
            )).scalar_one_or_none()
        return row is not None

    async def mark_email_as_processed(self, email_id: str) -> None:
        async with self.session_factory() as session:
            exists = (await session.execute(
                select(ProcessedEmail.id).filter_by(email_id=email_id)
            )).scalar_one_or_none()
            if exists:
                return
            session.add(ProcessedEmail(email_id=email_id))
            await session.commit()
