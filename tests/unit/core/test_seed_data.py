from __future__ import annotations

from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command

from modules.categories.models import Category
from modules.core.permissions import get_role
from modules.products.models import Product

pytestmark = pytest.mark.unit

User = get_user_model()


class TestSeedData:
    def test_seeds_roles_catalog_and_accounts(self):
        out = StringIO()
        call_command("seed_data", stdout=out)

        assert get_role(User.objects.get(username="owner")) == "owner"
        assert get_role(User.objects.get(username="kasir")) == "cashier"
        assert Category.objects.count() == 4
        assert Product.objects.count() == 5
        assert Product.objects.get(name="Sambal Jamur").category.name == "Sambal"
        assert "Seed completed" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_data", stdout=StringIO())
        call_command("seed_data", stdout=StringIO())

        assert User.objects.count() == 2
        assert Category.objects.count() == 4
        assert Product.objects.count() == 5
