import logging
import time
from contextlib import asynccontextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from wardrobe.constants import SLOW_QUERY_MS
from wardrobe.exceptions import ConstraintViolationError, StorageError, WardrobeError


def translate_error(label: str, error: SQLAlchemyError) -> WardrobeError:
    """Map a SQLAlchemy failure onto the data layer's error taxonomy."""
    if isinstance(error, IntegrityError):
        return ConstraintViolationError(f"{label}: {error.orig}")
    return StorageError(f"{label}: {error}")


@asynccontextmanager
async def run_transaction(label: str):
    """
    Wraps one unit of work with timing and failure logging.

    - Logs failures with the label before re-raising them.
    - Warns when the unit of work takes longer than SLOW_QUERY_MS.
    - SQLAlchemy errors leave as ConstraintViolationError or StorageError.
    """
    started = time.perf_counter()
    try:
        yield
    except WardrobeError as e:
        logging.error(f"❌ [db] {label} failed: {e}")
        raise
    except SQLAlchemyError as e:
        logging.error(f"❌ [db] {label} failed: {e}")
        raise translate_error(label, e) from e

    elapsed_ms = (time.perf_counter() - started) * 1000
    if elapsed_ms > SLOW_QUERY_MS:
        logging.warning(f"[db/slow] {label} took {elapsed_ms:.0f}ms")
    else:
        logging.debug(f"[db] {label} took {elapsed_ms:.1f}ms")
