"""
Pydantic schemas for orders and their priced lines.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from store_api.schemas.common import RecordRead


class OrderBase(BaseModel):
    customer_id: int = Field(..., description="Owning customer")
    order_date: datetime = Field(..., description="When the order was placed")
    delivery_date: datetime = Field(..., description="Delivery date")
    delivery_order: bool = Field(..., description="Delivery flag")
    discount: float = Field(default=0, description="Order-level discount")
    uk_order_number: str = Field(..., description="External order number")


class OrderCreate(OrderBase):
    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "order_date": "2024-05-01T10:00:00",
                "delivery_date": "2024-05-03T10:00:00",
                "delivery_order": True,
                "discount": 0,
                "uk_order_number": "UK-0001",
            }
        }


class OrderUpdate(OrderBase):
    pass


class OrderRead(OrderBase, RecordRead):
    pass


class OrderProductSupplierBase(BaseModel):
    order_id: int = Field(..., description="Order the line belongs to")
    product_supplier_id: int = Field(..., description="Supplier offer bought")
    value: float = Field(..., description="Value charged on this order")
    discount: float = Field(default=0, description="Discount on this order")


class OrderProductSupplierCreate(OrderProductSupplierBase):
    pass


class OrderProductSupplierUpdate(OrderProductSupplierBase):
    pass


class OrderProductSupplierRead(OrderProductSupplierBase, RecordRead):
    pass


class OrderWithOrderProducts(OrderRead):
    order_products: List[OrderProductSupplierRead] = Field(default_factory=list)
