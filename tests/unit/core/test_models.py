"""Unit tests for the shared model infrastructure.

``BaseModel`` and ``ActiveQuerySet`` are abstract / generic, so they are
exercised through concrete models (Customer, Category).
"""

from __future__ import annotations

import uuid

import pytest

from modules.categories.models import Category
from modules.customers.models import Customer

pytestmark = pytest.mark.unit


class TestBaseModel:
    def test_primary_key_is_uuid7(self):
        customer = Customer.objects.create(name="A", phone_number="0811111111")
        assert isinstance(customer.id, uuid.UUID)
        assert customer.id.version == 7

    def test_ids_sort_by_creation(self):
        first = Customer.objects.create(name="A", phone_number="0811111111")
        second = Customer.objects.create(name="B", phone_number="0811111112")
        assert first.id < second.id

    def test_update_fields_also_refreshes_updated_at(self):
        customer = Customer.objects.create(name="A", phone_number="0811111111")
        before = customer.updated_at
        customer.name = "B"
        customer.save(update_fields=["name"])
        customer.refresh_from_db()
        assert customer.name == "B"
        assert customer.updated_at > before


class TestActiveQuerySet:
    def test_active_and_inactive(self):
        Category.objects.create(name="Crispy")
        Category.objects.create(name="Arsip", is_active=False)
        assert [c.name for c in Category.objects.active()] == ["Crispy"]
        assert [c.name for c in Category.objects.inactive()] == ["Arsip"]

    def test_objects_returns_everything(self):
        Category.objects.create(name="Crispy")
        Category.objects.create(name="Arsip", is_active=False)
        assert Category.objects.count() == 2
