"""
Supplier model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from store_api.models.base import Base, StoreModel


class Supplier(Base, StoreModel):
    """
    Supplier of products.

    Attributes:
        name: Legal name
        tax_id: Tax identification number
        fantasy_name: Trading name
        sales: Sales counter
        quantity_stock: Units held in stock
        products: Product offers (one-to-many by supplier_id)
        contact: Contact details (one-to-one by contact.supplier_id)
    """

    __tablename__ = "suppliers"

    name = Column(String(255), nullable=False, doc="Supplier name")
    tax_id = Column(String(64), nullable=False, doc="Supplier tax id")
    fantasy_name = Column(String(255), nullable=True, doc="Supplier fantasy name")
    sales = Column(Integer, nullable=False, default=0, doc="Supplier quantity of sales")
    quantity_stock = Column(Integer, nullable=False, default=0, doc="Supplier quantity stock")

    products = relationship(
        "ProductSupplier",
        back_populates="supplier",
        lazy="raise",
    )

    contact = relationship(
        "Contact",
        back_populates="supplier",
        uselist=False,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"Supplier(id={self.id!r}, tax_id={self.tax_id!r})"
