"""
Customer model.

A customer places orders and owns at most one active contact record.
"""

from sqlalchemy import Column, Date, String
from sqlalchemy.orm import relationship

from store_api.models.base import Base, StoreModel


class Customer(Base, StoreModel):
    """
    Customer of the store.

    Attributes:
        id: Surrogate primary key
        first_name: First name
        last_name: Last name
        birthday: Date of birth
        tax_id: Tax identification number
        orders: Orders placed by the customer (one-to-many by customer_id)
        contact: Contact details (one-to-one by contact.customer_id)
    """

    __tablename__ = "customers"

    first_name = Column(String(255), nullable=False, doc="First name of the customer")
    last_name = Column(String(255), nullable=False, doc="Last name of the customer")
    birthday = Column(Date, nullable=False, doc="Birthday of the customer")
    tax_id = Column(String(64), nullable=False, doc="Tax id of the customer")

    # Relationships are never lazy loaded; reads that need them say so.
    orders = relationship(
        "Order",
        back_populates="customer",
        lazy="raise",
        order_by="Order.id",
    )

    contact = relationship(
        "Contact",
        back_populates="customer",
        uselist=False,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"Customer(id={self.id!r}, tax_id={self.tax_id!r})"
