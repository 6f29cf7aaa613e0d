"""
Pydantic schemas for contacts.
"""

from typing import Optional

from pydantic import BaseModel, Field

from store_api.schemas.common import RecordRead


class ContactBase(BaseModel):
    phone: str
    secondary_phone: Optional[str] = None
    postal_code: str
    area: str
    district: str
    address_number: str
    city: str
    state: str
    country: str
    email: Optional[str] = None
    customer_id: Optional[int] = Field(default=None, description="Owning customer, if any")
    supplier_id: Optional[int] = Field(default=None, description="Owning supplier, if any")


class ContactCreate(ContactBase):
    class Config:
        json_schema_extra = {
            "example": {
                "phone": "+55 11 99999-0000",
                "postal_code": "01001-000",
                "area": "Praca da Se",
                "district": "Se",
                "address_number": "100",
                "city": "Sao Paulo",
                "state": "SP",
                "country": "Brazil",
                "email": "ana@example.com",
                "customer_id": 1,
            }
        }


class ContactUpdate(ContactBase):
    pass


class ContactRead(ContactBase, RecordRead):
    pass
