"""
Repositories for the catalogue entities, which only need the generic
contract: products, suppliers, supplier offers and order lines.
"""

from store_api.models.order_product_supplier import OrderProductSupplier
from store_api.models.product import Product
from store_api.models.product_supplier import ProductSupplier
from store_api.models.supplier import Supplier
from store_api.repositories.base import Repository


class ProductRepository(Repository[Product]):
    model = Product


class SupplierRepository(Repository[Supplier]):
    model = Supplier


class ProductSupplierRepository(Repository[ProductSupplier]):
    model = ProductSupplier


class OrderProductSupplierRepository(Repository[OrderProductSupplier]):
    model = OrderProductSupplier
