"""
Health probe functions for dependency checks.

Each probe returns True when the dependency is healthy and False
otherwise; it never raises, and it gives up after its timeout.
"""

import asyncio

from sqlalchemy.exc import SQLAlchemyError

from store_api.core.database import Database
from store_api.core.logging_config import get_logger


logger = get_logger(__name__)


async def check_database(database: Database, timeout_seconds: float = 2.0) -> bool:
    """
    Check database connectivity with a ``SELECT 1``.

    Args:
        database: Store handle to probe
        timeout_seconds: Maximum time to wait for the answer (default: 2.0)

    Returns:
        True if the database answered in time, False otherwise

    Example:
        >>> is_healthy = await check_database(app.state.database)
    """
    try:
        async with asyncio.timeout(timeout_seconds):
            return await database.ping()

    except TimeoutError:
        logger.warning("Database probe timed out", extra={"timeout_seconds": timeout_seconds})
        return False
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database probe failed", extra={"error": str(e)})
        return False
