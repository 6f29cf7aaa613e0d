"""
Pydantic schemas for customers.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from store_api.schemas.common import RecordRead
from store_api.schemas.contact import ContactRead
from store_api.schemas.order import OrderRead


class CustomerBase(BaseModel):
    first_name: str = Field(..., description="First name of the customer")
    last_name: str = Field(..., description="Last name of the customer")
    birthday: date = Field(..., description="Birthday of the customer")
    tax_id: str = Field(..., description="Tax id of the customer")


class CustomerCreate(CustomerBase):
    class Config:
        json_schema_extra = {
            "example": {
                "first_name": "Ana",
                "last_name": "Lima",
                "birthday": "1990-04-12",
                "tax_id": "123",
            }
        }


class CustomerUpdate(CustomerBase):
    """
    Full desired state of a customer; every field is overwritten.
    """
    pass


class CustomerRead(CustomerBase, RecordRead):
    pass


class CustomerWithOrders(CustomerRead):
    orders: List[OrderRead] = Field(default_factory=list)


class CustomerWithContact(CustomerRead):
    contact: Optional[ContactRead] = None
