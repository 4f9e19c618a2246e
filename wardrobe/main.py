import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from wardrobe.constants import DATABASE_URL, LOG_LEVEL
from wardrobe.database.database import Database


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(message)s",
    )


async def bootstrap(url: Optional[str] = None) -> Database:
    """Open the store, apply pending migrations and seed reference data."""
    db = Database(url or DATABASE_URL)
    try:
        await db.initialize()
    except Exception as e:
        logging.error(f"❌ Wardrobe store failed to start: {e}")
        await db.close()
        raise
    return db


@asynccontextmanager
async def open_store(url: Optional[str] = None) -> AsyncIterator[Database]:
    db = await bootstrap(url)
    try:
        yield db
    finally:
        await db.close()
