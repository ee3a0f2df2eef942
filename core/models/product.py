# =============================================================================
# core/models/product.py - Product Table and Read Model
# =============================================================================
# Two views of one product row:
# - Product: SQLAlchemy mapping of the `products` table
# - ProductRecord: immutable pydantic model handed to the template
#
# The table is created and filled outside this application.
# The server only reads it.
# =============================================================================

from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Column, Integer, Numeric, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()

TWO_PLACES = Decimal("0.01")


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)


class ProductRecord(BaseModel):
    """
    One product as shown on the page.

    Example:
        {
            "id": 1,
            "name": "Desk Lamp",
            "description": "Adjustable arm, warm white LED",
            "price": "24.50"
        }
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int = Field(..., description="Primary key")

    name: str = Field(..., description="Product name")

    description: str | None = Field(
        default=None,
        description="Long description (optional)"
    )

    price: Decimal | None = Field(
        default=None,
        description="Unit price (NULL when not set)"
    )

    @property
    def display_price(self) -> str:
        """Price with exactly two fraction digits, e.g. "12.50"; empty when unset."""
        if self.price is None:
            return ""
        return str(self.price.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))
