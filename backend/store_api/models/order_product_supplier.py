"""
OrderProductSupplier model.

Order line linking an Order to the ProductSupplier offer it bought. The
value and discount are copied at order time, so later catalogue changes on
ProductSupplier never rewrite historical order pricing.
"""

from sqlalchemy import Column, Float, ForeignKey
from sqlalchemy.orm import relationship

from store_api.models.base import Base, IdentifierType, StoreModel


class OrderProductSupplier(Base, StoreModel):
    """
    Priced line of an order.
    """

    __tablename__ = "order_product_suppliers"

    order_id = Column(
        IdentifierType,
        ForeignKey("orders.id"),
        nullable=False,
        index=True,
        doc="Foreign key for Order"
    )
    product_supplier_id = Column(
        IdentifierType,
        ForeignKey("product_suppliers.id"),
        nullable=False,
        index=True,
        doc="Foreign key for ProductSupplier"
    )
    value = Column(Float, nullable=False, doc="Value charged on this order")
    discount = Column(Float, nullable=False, default=0, doc="Discount applied on this order")

    order = relationship("Order", back_populates="order_products", lazy="raise")
    product_supplier = relationship(
        "ProductSupplier",
        back_populates="order_products",
        lazy="raise",
    )
