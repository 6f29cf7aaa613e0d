"""
Unit tests for ContactRepository.

Tests follow AAA pattern (Arrange, Act, Assert).
"""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.models import Contact
from store_api.repositories.contact import ContactRepository


def _contact(**overrides) -> Contact:
    data = {
        "phone": "+55 11 98888-0000",
        "postal_code": "20000-000",
        "area": "Rua A",
        "district": "Centro",
        "address_number": "1",
        "city": "Rio de Janeiro",
        "state": "RJ",
        "country": "Brazil",
    }
    data.update(overrides)
    return Contact(**data)


class TestContactRepository:
    """Tests for contact CRUD and the owner-filtered reads."""

    @pytest.mark.anyio
    async def test_get_all_by_customer_id(
        self, async_session: AsyncSession, make_customer, make_contact
    ):
        # Arrange
        ana = await make_customer()
        bea = await make_customer(first_name="Bea")
        ana_contact = await make_contact(customer_id=ana.id)
        await make_contact(customer_id=bea.id)
        repo = ContactRepository(async_session)

        # Act
        contacts = await repo.get_all_by_customer_id(ana.id)

        # Assert
        assert [c.id for c in contacts] == [ana_contact.id]

    @pytest.mark.anyio
    async def test_get_all_by_supplier_id(
        self, async_session: AsyncSession, make_supplier, make_contact
    ):
        acme = await make_supplier()
        contact = await make_contact(supplier_id=acme.id)
        repo = ContactRepository(async_session)

        assert [c.id for c in await repo.get_all_by_supplier_id(acme.id)] == [contact.id]
        assert await repo.get_all_by_customer_id(acme.id) == []

    @pytest.mark.anyio
    async def test_second_active_contact_for_customer_rejected(
        self, async_session: AsyncSession, make_customer, make_contact
    ):
        """
        Test one active contact per customer.

        Arrange: Customer that already has a contact
        Act: Create a second one for the same customer
        Assert: IntegrityError from the partial unique index
        """
        # Arrange
        ana = await make_customer()
        await make_contact(customer_id=ana.id)
        repo = ContactRepository(async_session)

        # Act / Assert
        with pytest.raises(IntegrityError):
            await repo.create(_contact(customer_id=ana.id))

    @pytest.mark.anyio
    async def test_replacement_allowed_after_soft_delete(
        self, async_session: AsyncSession, make_customer, make_contact
    ):
        # Arrange
        ana = await make_customer()
        old = await make_contact(customer_id=ana.id)
        repo = ContactRepository(async_session)
        await repo.delete(old.id)

        # Act
        new = await repo.create(_contact(customer_id=ana.id))

        # Assert
        assert [c.id for c in await repo.get_all_by_customer_id(ana.id)] == [new.id]

    @pytest.mark.anyio
    async def test_update_writes_null_for_omitted_optional(
        self, async_session: AsyncSession, make_customer, make_contact
    ):
        """
        Test that update is a whole-record overwrite.

        Arrange: Contact with an e-mail
        Act: Update with a state that has no e-mail
        Assert: E-mail is now NULL
        """
        # Arrange
        ana = await make_customer()
        existing = await make_contact(customer_id=ana.id, email="ana@example.com")
        repo = ContactRepository(async_session)

        # Act
        replacement = _contact(customer_id=ana.id, city="Niteroi")
        replacement.id = existing.id
        updated = await repo.update(replacement)

        # Assert
        assert updated.email is None
        assert updated.city == "Niteroi"

    @pytest.mark.anyio
    async def test_delete_all_keeps_rows(
        self, async_session: AsyncSession, make_customer, make_contact
    ):
        # Arrange
        ana = await make_customer()
        bea = await make_customer(first_name="Bea")
        first = await make_contact(customer_id=ana.id)
        second = await make_contact(customer_id=bea.id)
        repo = ContactRepository(async_session)

        # Act
        count = await repo.delete_all([first.id, second.id])

        # Assert
        assert count == 2
        assert await repo.get_all() == []
        rows = (await async_session.execute(
            text("SELECT id, deleted_at FROM contacts ORDER BY id")
        )).all()
        assert [row.id for row in rows] == [first.id, second.id]
        assert all(row.deleted_at is not None for row in rows)
