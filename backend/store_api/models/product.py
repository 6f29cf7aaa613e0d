"""
Product model.

Catalogue item; the suppliers offering it are ProductSupplier rows.
"""

from sqlalchemy import Column, Float, Integer, String
from sqlalchemy.orm import relationship

from store_api.models.base import Base, StoreModel


class Product(Base, StoreModel):
    """
    Product sold through one or more suppliers.

    Attributes:
        name: General name of the product
        code: General code of the product
        sales: Sales counter
        market_value: Reference market value
        suppliers: Supplier offers (one-to-many by product_id)
    """

    __tablename__ = "products"

    name = Column(String(255), nullable=False, doc="General name of the product")
    code = Column(String(64), nullable=False, doc="General code of the product")
    sales = Column(Integer, nullable=False, default=0, doc="Total sales of the product")
    market_value = Column(Float, nullable=True, doc="Default market value")

    suppliers = relationship(
        "ProductSupplier",
        back_populates="product",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"Product(id={self.id!r}, code={self.code!r})"
