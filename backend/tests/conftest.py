"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- An in-memory database per test
- An HTTP client bound to an application using that database
- Factories inserting committed rows
"""

import os
import sys
from datetime import date, datetime
from pathlib import Path

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AUTO_MIGRATE"] = "false"
os.environ["LOG_LEVEL"] = "INFO"

# Add backend directory to path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))


@pytest.fixture
def anyio_backend():
    """
    Configure anyio backend for async tests.

    Returns:
        str: Backend name ("asyncio")
    """
    return "asyncio"


@pytest.fixture(scope="function")
async def database():
    """
    Provide a fresh in-memory Database with every table created.
    """
    from store_api.core.database import Database

    db = Database("sqlite+aiosqlite:///:memory:")
    await db.create_all()

    yield db

    await db.dispose()


@pytest.fixture(scope="function")
async def async_session(database):
    """
    Provide an async session on the test database.
    """
    async with database.session_maker() as session:
        yield session


@pytest.fixture(scope="function")
async def client(database):
    """
    Provide an HTTP client for an application wired to the test database.
    """
    from httpx import ASGITransport, AsyncClient

    from store_api.core.config import Settings
    from store_api.main import create_app

    app = create_app(settings=Settings(), database=database)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


async def _persist(session, record):
    session.add(record)
    await session.commit()
    return record


@pytest.fixture
def make_customer(async_session):
    """
    Factory inserting a customer (Ana Lima unless overridden).
    """
    from store_api.models import Customer

    async def _make(**overrides):
        data = {
            "first_name": "Ana",
            "last_name": "Lima",
            "birthday": date(1990, 4, 12),
            "tax_id": "123",
        }
        data.update(overrides)
        return await _persist(async_session, Customer(**data))

    return _make


@pytest.fixture
def make_order(async_session):
    """
    Factory inserting an order for ``customer_id``.
    """
    from store_api.models import Order

    async def _make(customer_id, **overrides):
        data = {
            "customer_id": customer_id,
            "order_date": datetime(2024, 5, 1, 10, 0),
            "delivery_date": datetime(2024, 5, 3, 10, 0),
            "delivery_order": True,
            "discount": 0.0,
            "uk_order_number": "UK-0001",
        }
        data.update(overrides)
        return await _persist(async_session, Order(**data))

    return _make


@pytest.fixture
def make_contact(async_session):
    """
    Factory inserting a contact; pass customer_id or supplier_id to own it.
    """
    from store_api.models import Contact

    async def _make(**overrides):
        data = {
            "phone": "+55 11 99999-0000",
            "postal_code": "01001-000",
            "area": "Praca da Se",
            "district": "Se",
            "address_number": "100",
            "city": "Sao Paulo",
            "state": "SP",
            "country": "Brazil",
        }
        data.update(overrides)
        return await _persist(async_session, Contact(**data))

    return _make


@pytest.fixture
def make_product(async_session):
    from store_api.models import Product

    async def _make(**overrides):
        data = {"name": "Coffee", "code": "COF-1", "sales": 0, "market_value": 12.5}
        data.update(overrides)
        return await _persist(async_session, Product(**data))

    return _make


@pytest.fixture
def make_supplier(async_session):
    from store_api.models import Supplier

    async def _make(**overrides):
        data = {"name": "Acme", "tax_id": "999", "sales": 0, "quantity_stock": 10}
        data.update(overrides)
        return await _persist(async_session, Supplier(**data))

    return _make


@pytest.fixture
def make_product_supplier(async_session):
    from store_api.models import ProductSupplier

    async def _make(product_id, supplier_id, **overrides):
        data = {
            "product_id": product_id,
            "supplier_id": supplier_id,
            "cost": 8.0,
            "value": 12.0,
            "quantity": 5,
            "sales": 0,
        }
        data.update(overrides)
        return await _persist(async_session, ProductSupplier(**data))

    return _make
