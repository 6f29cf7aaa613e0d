"""
Pydantic schemas for products, suppliers and supplier offers.
"""

from typing import Optional

from pydantic import BaseModel, Field

from store_api.schemas.common import RecordRead


class ProductBase(BaseModel):
    name: str = Field(..., description="General name of the product")
    code: str = Field(..., description="General code of the product")
    sales: int = Field(default=0, description="Total sales of the product")
    market_value: Optional[float] = Field(default=None, description="Default market value")


class ProductCreate(ProductBase):
    pass


class ProductUpdate(ProductBase):
    pass


class ProductRead(ProductBase, RecordRead):
    pass


class SupplierBase(BaseModel):
    name: str = Field(..., description="Supplier name")
    tax_id: str = Field(..., description="Supplier tax id")
    fantasy_name: Optional[str] = Field(default=None, description="Trading name")
    sales: int = Field(default=0, description="Supplier quantity of sales")
    quantity_stock: int = Field(default=0, description="Supplier quantity stock")


class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(SupplierBase):
    pass


class SupplierRead(SupplierBase, RecordRead):
    pass


class ProductSupplierBase(BaseModel):
    product_id: int = Field(..., description="Product offered")
    supplier_id: int = Field(..., description="Supplier offering it")
    cost: float = Field(..., description="Purchase cost")
    value: float = Field(..., description="Catalogue sale value")
    quantity: int = Field(..., description="Quantity available")
    supplier_product_code: Optional[str] = None
    supplier_product_name: Optional[str] = None
    sales: int = Field(default=0, description="Sales counter")


class ProductSupplierCreate(ProductSupplierBase):
    pass


class ProductSupplierUpdate(ProductSupplierBase):
    pass


class ProductSupplierRead(ProductSupplierBase, RecordRead):
    pass
