# =============================================================================
# core/services/product_service.py - Product Queries
# =============================================================================
# Reads the products table through the shared async connection pool.
# =============================================================================

import logging

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.exceptions import DatabaseError
from core.models.product import Product, ProductRecord

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service for reading products.

    Owns the engine it is given and closes its pool on shutdown.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    async def list_products(self) -> list[ProductRecord]:
        """
        Fetch every product row.

        A connection is checked out of the pool for the duration of the
        query and returned before this method returns.

        Returns:
            List of ProductRecord in table order

        Raises:
            DatabaseError: If the connection or query fails, or a row
                does not fit ProductRecord
        """
        query = select(Product.__table__)

        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(query)
                rows = result.mappings().all()

            records = [ProductRecord.model_validate(dict(row)) for row in rows]

        except (SQLAlchemyError, OSError, ValidationError) as e:
            logger.exception(f"Error fetching data from database: {e}")
            raise DatabaseError(str(e)) from e

        logger.debug(f"Fetched {len(records)} products")
        return records

    async def close(self) -> None:
        """Close all pooled connections."""
        await self._engine.dispose()
        logger.info("MySQL connections closed")
