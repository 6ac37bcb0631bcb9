"""
Email parsing endpoints for testing alert parsing and creating expenses from
pasted alert emails.
"""
from fastapi import APIRouter, Depends
from pydantic import ValidationError

from alert_parser import EmailParser, ParserOptions
from app.config import settings
from app.db import AsyncSessionLocal
from app.exceptions import BadRequestError, EmailNotParsedError, InternalServerError
from app.schemas.email import ParseEmailRequest, ParseEmailResponse
from app.schemas.expense import ExpenseCreate, ExpenseResponse
from app.services.storage import DatabaseStorage, Storage
from app.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/email", tags=["Email Parser"])


def get_storage() -> Storage:
    return DatabaseStorage(AsyncSessionLocal)


def get_parser(storage: Storage = Depends(get_storage)) -> EmailParser:
    return EmailParser(storage, ParserOptions.from_settings(settings))


def get_default_user_id():
    return settings.EXPENSE_DEFAULT_USER_ID


@router.post("/parse", response_model=ParseEmailResponse)
async def parse_email(
    request: ParseEmailRequest,
    parser: EmailParser = Depends(get_parser)
):
    """Parse an alert email without storing anything"""
    parsed = await parser.parse_email(request.subject, request.body, request.sender, request.email_date)
    if parsed is None:
        raise EmailNotParsedError()
    return {"success": True, "transaction": parsed.to_dict()}


@router.post("/parse-and-create", response_model=ParseEmailResponse)
async def parse_and_create_expense(
    request: ParseEmailRequest,
    parser: EmailParser = Depends(get_parser),
    storage: Storage = Depends(get_storage),
    user_id=Depends(get_default_user_id)
):
    """
    Parse an alert email and store it as an expense for the default user.

    Returns:
        The parsed transaction and the created expense
    """
    if not user_id:
        raise BadRequestError("No default user configured for expense creation")

    parsed = await parser.parse_email(request.subject, request.body, request.sender, request.email_date)
    if parsed is None:
        raise EmailNotParsedError()

    try:
        expense = ExpenseCreate(**parser.to_expense(parsed), source="email")
    except ValidationError as e:
        logger.error(f"Parsed transaction is not a valid expense: {e}")
        raise BadRequestError("Parsed transaction is not a valid expense")

    try:
        created = await storage.create_expense(expense.model_dump(), user_id)
    except Exception as e:
        logger.error(f"Error creating expense from email: {e}")
        raise InternalServerError("Failed to create expense")

    return {
        "success": True,
        "transaction": parsed.to_dict(),
        "expense": ExpenseResponse.model_validate(created).model_dump(mode="json"),
    }
