"""
ProductSupplier model.

Join entity between Product and Supplier carrying the supplier's catalogue
terms (cost, price, stock) for that product.
"""

from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from store_api.models.base import Base, IdentifierType, StoreModel


class ProductSupplier(Base, StoreModel):
    """
    A supplier's offer of a product.
    """

    __tablename__ = "product_suppliers"

    product_id = Column(
        IdentifierType,
        ForeignKey("products.id"),
        nullable=False,
        index=True,
        doc="Foreign key for Product"
    )
    supplier_id = Column(
        IdentifierType,
        ForeignKey("suppliers.id"),
        nullable=False,
        index=True,
        doc="Foreign key for Supplier"
    )
    cost = Column(Float, nullable=False, doc="Purchase cost")
    value = Column(Float, nullable=False, doc="Catalogue sale value")
    quantity = Column(Integer, nullable=False, doc="Quantity available")
    supplier_product_code = Column(String(64), nullable=True, doc="Supplier's own product code")
    supplier_product_name = Column(String(255), nullable=True, doc="Supplier's own product name")
    sales = Column(Integer, nullable=False, default=0, doc="Sales counter")

    product = relationship("Product", back_populates="suppliers", lazy="raise")
    supplier = relationship("Supplier", back_populates="products", lazy="raise")

    order_products = relationship(
        "OrderProductSupplier",
        back_populates="product_supplier",
        lazy="raise",
    )
