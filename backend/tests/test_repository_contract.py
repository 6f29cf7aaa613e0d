"""
Contract tests run against every entity repository.

Each case builds records for one entity on top of a shared set of parent
rows, so foreign keys always point at something real.

Tests follow AAA pattern (Arrange, Act, Assert).
"""

from datetime import date, datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.core.exceptions import NotFoundError
from store_api.models import (
    Contact,
    Customer,
    Order,
    OrderProductSupplier,
    Product,
    ProductSupplier,
    Supplier,
)
from store_api.repositories import (
    ContactRepository,
    CustomerRepository,
    OrderProductSupplierRepository,
    OrderRepository,
    ProductRepository,
    ProductSupplierRepository,
    SupplierRepository,
)


def _customer(parents, n):
    return Customer(first_name=f"Ana {n}", last_name="Lima", birthday=date(1990, 4, 12), tax_id=f"12{n}")


def _order(parents, n):
    return Order(
        customer_id=parents["customer"].id,
        order_date=datetime(2024, 5, 1, 10, n),
        delivery_date=datetime(2024, 5, 3, 10, n),
        delivery_order=n % 2 == 0,
        discount=float(n),
        uk_order_number=f"UK-{n}",
    )


def _contact(parents, n):
    # Alternate owners; at most one active contact per customer and supplier.
    owner = {0: {"customer_id": parents["customer"].id}, 1: {"supplier_id": parents["supplier"].id}}
    return Contact(
        phone=f"+55 11 9999-000{n}",
        postal_code="01001-000",
        area="Praca da Se",
        district="Se",
        address_number=str(n),
        city="Sao Paulo",
        state="SP",
        country="Brazil",
        email=f"contact{n}@example.com",
        **owner.get(n, {}),
    )


def _product(parents, n):
    return Product(name=f"Product {n}", code=f"P-{n}", sales=n, market_value=10.0 + n)


def _supplier(parents, n):
    return Supplier(name=f"Supplier {n}", tax_id=f"9{n}", fantasy_name=f"S{n}", sales=n, quantity_stock=n * 3)


def _product_supplier(parents, n):
    return ProductSupplier(
        product_id=parents["product"].id,
        supplier_id=parents["supplier"].id,
        cost=5.0 + n,
        value=9.0 + n,
        quantity=n,
        supplier_product_code=f"SP-{n}",
        sales=n,
    )


def _order_product_supplier(parents, n):
    return OrderProductSupplier(
        order_id=parents["order"].id,
        product_supplier_id=parents["offer"].id,
        value=12.0 + n,
        discount=float(n),
    )


ENTITIES = [
    pytest.param(CustomerRepository, _customer, id="customer"),
    pytest.param(OrderRepository, _order, id="order"),
    pytest.param(ContactRepository, _contact, id="contact"),
    pytest.param(ProductRepository, _product, id="product"),
    pytest.param(SupplierRepository, _supplier, id="supplier"),
    pytest.param(ProductSupplierRepository, _product_supplier, id="product_supplier"),
    pytest.param(OrderProductSupplierRepository, _order_product_supplier, id="order_product_supplier"),
]


@pytest.fixture
async def parents(async_session: AsyncSession):
    """
    One row of each entity other records can reference.
    """
    customer = Customer(first_name="Parent", last_name="Customer", birthday=date(1980, 1, 1), tax_id="P")
    product = Product(name="Parent", code="PARENT")
    supplier = Supplier(name="Parent", tax_id="P")
    async_session.add_all([customer, product, supplier])
    await async_session.flush()

    order = Order(
        customer_id=customer.id,
        order_date=datetime(2024, 1, 1),
        delivery_date=datetime(2024, 1, 2),
        delivery_order=False,
        uk_order_number="PARENT",
    )
    offer = ProductSupplier(product_id=product.id, supplier_id=supplier.id, cost=1.0, value=2.0, quantity=1)
    async_session.add_all([order, offer])
    await async_session.commit()

    return {"customer": customer, "product": product, "supplier": supplier, "order": order, "offer": offer}


class TestRepositoryContract:
    """The generic contract, checked for all seven entities."""

    @pytest.mark.anyio
    @pytest.mark.parametrize("repository_class,build", ENTITIES)
    async def test_create_then_get_returns_caller_fields(
        self, async_session: AsyncSession, parents, repository_class, build
    ):
        """
        Test that a stored record reads back with the fields it was given.

        Arrange: Transient record and a snapshot of its caller fields
        Act: create, then get_by_id in a fresh identity map
        Assert: Every caller field matches the snapshot
        """
        # Arrange
        repo = repository_class(async_session)
        record = build(parents, 0)
        expected = {name: getattr(record, name) for name in repo.model.mutable_column_names()}

        # Act
        created = await repo.create(record)
        await async_session.commit()
        async_session.expunge_all()
        fetched = await repo.get_by_id(created.id)

        # Assert
        assert fetched is not record
        assert {name: getattr(fetched, name) for name in expected} == expected

    @pytest.mark.anyio
    @pytest.mark.parametrize("repository_class,build", ENTITIES)
    async def test_delete_all_excludes_every_listed_id(
        self, async_session: AsyncSession, parents, repository_class, build
    ):
        """
        Test that delete_all removes exactly the listed ids from reads.

        Arrange: Three new records
        Act: delete_all on the first two
        Assert: get_all keeps the third and none of the deleted ids
        """
        # Arrange
        repo = repository_class(async_session)
        records = [await repo.create(build(parents, n)) for n in range(3)]
        doomed = [records[0].id, records[1].id]

        # Act
        count = await repo.delete_all(doomed)
        remaining = [r.id for r in await repo.get_all()]

        # Assert
        assert count == 2
        assert not set(doomed) & set(remaining)
        assert records[2].id in remaining
        for record_id in doomed:
            with pytest.raises(NotFoundError):
                await repo.get_by_id(record_id)
