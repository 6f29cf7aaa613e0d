"""
Order model.

An order belongs to a customer and lists the supplier offers it bought
through OrderProductSupplier rows.
"""

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, String
from sqlalchemy.orm import relationship

from store_api.models.base import Base, IdentifierType, StoreModel


class Order(Base, StoreModel):
    """
    Order placed by a customer.

    Attributes:
        id: Surrogate primary key
        customer_id: Owning customer
        order_date: When the order was placed
        delivery_date: When the order is (or was) delivered
        delivery_order: Whether the order is shipped rather than picked up
        discount: Order-level discount
        uk_order_number: External order number
        order_products: Priced order lines (one-to-many by order_id)
    """

    __tablename__ = "orders"

    customer_id = Column(
        IdentifierType,
        ForeignKey("customers.id"),
        nullable=False,
        index=True,
        doc="Foreign key for Customer"
    )
    order_date = Column(DateTime, nullable=False, doc="Order date")
    delivery_date = Column(DateTime, nullable=False, doc="Delivery date")
    delivery_order = Column(Boolean, nullable=False, doc="Delivery flag")
    discount = Column(Float, nullable=False, default=0, doc="Discount for the order")
    uk_order_number = Column(String(255), nullable=False, doc="External order number")

    customer = relationship("Customer", back_populates="orders", lazy="raise")

    order_products = relationship(
        "OrderProductSupplier",
        back_populates="order",
        lazy="raise",
        order_by="OrderProductSupplier.id",
    )

    def __repr__(self) -> str:
        return f"Order(id={self.id!r}, customer_id={self.customer_id!r})"
