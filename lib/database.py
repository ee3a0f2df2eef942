# =============================================================================
# lib/database.py - Async MySQL Connection Pool
# =============================================================================
# Builds the SQLAlchemy AsyncEngine that owns the bounded connection pool.
# One engine is created per process and passed to the services that need it.
#
# Usage:
#   from lib.database import create_engine
#   engine = create_engine(settings.database_url, pool_size=10)
# =============================================================================

import logging

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)


def create_engine(url: URL | str, pool_size: int = 10, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine and its connection pool.

    The pool never grows past `pool_size`; extra callers wait for a
    connection to be returned. No connection is opened until first use.

    Args:
        url: SQLAlchemy URL (mysql+aiomysql://...)
        pool_size: Maximum concurrent connections
        echo: Log every SQL statement

    Returns:
        AsyncEngine: Engine backed by a bounded pool
    """
    engine = create_async_engine(
        url,
        pool_size=pool_size,
        max_overflow=0,
        pool_pre_ping=True,
        echo=echo,
    )
    logger.info(f"Database pool configured (max {pool_size} connections)")
    return engine
