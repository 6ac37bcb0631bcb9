"""
Email ingestion: turns batches of mailbox messages into stored expenses.
"""
from dataclasses import dataclass, asdict
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Protocol, Union

from pydantic import ValidationError

from alert_parser import EmailParser
from alert_parser.models import BankPattern
from alert_parser.sender_classifier import build_sender_query
from app.config import settings
from app.schemas.email import InboundEmail
from app.schemas.expense import ExpenseCreate
from app.services.storage import Storage
from app.logging_config import get_logger

logger = get_logger(__name__)

REGULAR_SYNC_WINDOW = timedelta(hours=24)


class MailClient(Protocol):
    """Mailbox access used by poll()"""

    async def get_recent_emails(self, query: str, max_results: int) -> List[Any]:
        ...


@dataclass
class IngestionSummary:
    seen: int = 0
    already_processed: int = 0
    processed: int = 0
    created: int = 0
    skipped: int = 0

    def to_dict(self):
        return asdict(self)


class EmailIngestionService:
    """Parses fetched alert emails and creates expenses for the default user"""

    def __init__(self, storage: Storage, parser: EmailParser, default_user_id: Optional[str] = None):
        self.storage = storage
        self.parser = parser
        self.default_user_id = default_user_id
        self.has_performed_initial_sync = False

    async def ingest(self, emails: Iterable[Union[InboundEmail, Dict[str, Any]]]) -> IngestionSummary:
        """
        Process a batch of messages in order.

        Every newly seen message is marked as processed before any expense is
        created, so a failing insert never causes the message to be parsed
        again on the next poll.
        """
        summary = IngestionSummary()

        for raw in emails:
            email = raw if isinstance(raw, InboundEmail) else InboundEmail.model_validate(raw)
            summary.seen += 1

            if await self.storage.is_email_processed(email.id):
                summary.already_processed += 1
                continue

            parsed = await self.parser.parse_email(email.subject, email.body, email.sender, email.date)
            await self.storage.mark_email_as_processed(email.id)
            summary.processed += 1

            if parsed is None:
                summary.skipped += 1
                continue

            if not self.default_user_id:
                logger.debug(f"Parsed email {email.id} but no default user is configured")
                summary.skipped += 1
                continue

            try:
                expense = ExpenseCreate(
                    **self.parser.to_expense(parsed),
                    source="email",
                    email_id=email.id,
                )
                await self.storage.create_expense(expense.model_dump(), self.default_user_id)
            except ValidationError as e:
                logger.error(f"Invalid expense data for email {email.id}: {e}")
                summary.skipped += 1
                continue
            except Exception as e:
                logger.error(f"Failed to create expense for email {email.id}: {e}")
                summary.skipped += 1
                continue

            summary.created += 1
            logger.info(f"Created expense: {parsed.merchant} - {parsed.amount}")

        logger.info(
            f"Ingested {summary.seen} emails: {summary.processed} processed, "
            f"{summary.created} expenses created, {summary.skipped} skipped, "
            f"{summary.already_processed} already processed"
        )
        return summary

    def sync_window(self, is_initial_sync: bool, now: Optional[datetime] = None):
        """Look-back start and message limit for one poll"""
        now = now or datetime.now(timezone.utc)
        if is_initial_sync:
            return now - timedelta(days=settings.EMAIL_SYNC_INITIAL_DAYS), settings.EMAIL_SYNC_INITIAL_BATCH_SIZE
        return now - REGULAR_SYNC_WINDOW, settings.EMAIL_SYNC_BATCH_SIZE

    async def poll(self, mail_client: MailClient, is_initial_sync: Optional[bool] = None) -> IngestionSummary:
        """
        Fetch recent bank emails and ingest them.

        Args:
            mail_client: Mailbox to search
            is_initial_sync: Use the longer initial look-back. Defaults to True
                until the first poll has completed.
        """
        if is_initial_sync is None:
            is_initial_sync = not self.has_performed_initial_sync

        after, limit = self.sync_window(is_initial_sync)
        bank_patterns = [BankPattern.from_record(p) for p in await self.storage.get_bank_patterns()]
        query = build_sender_query(bank_patterns, after=after)

        logger.info(f"{'Initial' if is_initial_sync else 'Regular'} sync: searching mailbox with {query!r}")
        emails = await mail_client.get_recent_emails(query, limit)
        logger.info(f"Found {len(emails)} potential bank emails")

        summary = await self.ingest(emails)
        self.has_performed_initial_sync = True
        return summary
