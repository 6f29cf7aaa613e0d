"""
Contact model.

Address and phone details owned either by a customer or by a supplier,
each through its own nullable foreign key.
"""

from sqlalchemy import Column, ForeignKey, Index, String, text
from sqlalchemy.orm import relationship

from store_api.models.base import Base, IdentifierType, StoreModel


class Contact(Base, StoreModel):
    """
    Contact information for a customer or a supplier.

    At most one active (not soft-deleted) contact exists per customer and
    per supplier; partial unique indexes enforce it in the database.
    """

    __tablename__ = "contacts"

    phone = Column(String(32), nullable=False, doc="Phone number")
    secondary_phone = Column(String(32), nullable=True, doc="Secondary phone number")
    postal_code = Column(String(32), nullable=False, doc="Postal code")
    area = Column(String(255), nullable=False, doc="Street / area")
    district = Column(String(255), nullable=False, doc="District")
    address_number = Column(String(32), nullable=False, doc="Address number")
    city = Column(String(255), nullable=False, doc="City")
    state = Column(String(255), nullable=False, doc="State")
    country = Column(String(255), nullable=False, doc="Country")
    email = Column(String(255), nullable=True, doc="E-mail address")

    customer_id = Column(
        IdentifierType,
        ForeignKey("customers.id"),
        nullable=True,
        doc="Foreign key for Customer (one-to-one)"
    )
    supplier_id = Column(
        IdentifierType,
        ForeignKey("suppliers.id"),
        nullable=True,
        doc="Foreign key for Supplier (one-to-one)"
    )

    customer = relationship("Customer", back_populates="contact", lazy="raise")
    supplier = relationship("Supplier", back_populates="contact", lazy="raise")

    __table_args__ = (
        Index(
            "uq_contacts_active_customer",
            "customer_id",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
        Index(
            "uq_contacts_active_supplier",
            "supplier_id",
            unique=True,
            sqlite_where=text("deleted_at IS NULL"),
            postgresql_where=text("deleted_at IS NULL"),
        ),
    )
