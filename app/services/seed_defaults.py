"""
Seed the default categories and bank patterns.

Usage:
    python -m app.services.seed_defaults
"""
import asyncio

from sqlalchemy.future import select
from sqlalchemy.ext.asyncio import AsyncSession

from alert_parser.defaults import DEFAULT_BANK_PATTERNS, default_categories
from app.db import AsyncSessionLocal, init_db
from app.models.bank_pattern import BankPattern
from app.models.category import Category
from app.schemas.bank_pattern import BankPatternCreate
from app.schemas.category import CategoryCreate
from app.logging_config import setup_logging, get_logger
from app.config import settings

logger = get_logger(__name__)


async def seed_defaults(session: AsyncSession) -> dict:
    """
    Insert default categories and bank patterns that are not stored yet.

    Existing rows (matched by name) are left untouched.

    Returns:
        Number of inserted categories and bank patterns
    """
    existing_categories = set((await session.execute(select(Category.name))).scalars().all())
    existing_banks = set((await session.execute(select(BankPattern.bank_name))).scalars().all())

    categories_added = 0
    for record in default_categories():
        if record["name"] in existing_categories:
            continue
        data = CategoryCreate(**record)
        session.add(Category(**data.model_dump()))
        categories_added += 1

    banks_added = 0
    for record in DEFAULT_BANK_PATTERNS:
        if record["bank_name"] in existing_banks:
            continue
        data = BankPatternCreate(**record)
        session.add(BankPattern(**data.model_dump()))
        banks_added += 1

    await session.commit()
    logger.info(f"Seeded {categories_added} categories and {banks_added} bank patterns")
    return {"categories": categories_added, "bank_patterns": banks_added}


async def main():
    await init_db()
    async with AsyncSessionLocal() as session:
        await seed_defaults(session)


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    asyncio.run(main())
