from __future__ import annotations

from types import SimpleNamespace

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser, Group

from modules.core.permissions import (
    CASHIER_GROUP,
    OWNER_GROUP,
    IsCashierOrOwner,
    IsOwner,
    get_role,
)

pytestmark = pytest.mark.unit

User = get_user_model()


def _request(user):
    return SimpleNamespace(user=user)


def _user(username, *groups):
    user = User.objects.create_user(username=username, password="x")
    for name in groups:
        user.groups.add(Group.objects.get_or_create(name=name)[0])
    return user


class TestGetRole:
    def test_anonymous_has_no_role(self):
        assert get_role(AnonymousUser()) is None

    def test_none_has_no_role(self):
        assert get_role(None) is None

    def test_cashier(self):
        assert get_role(_user("kasir", CASHIER_GROUP)) == CASHIER_GROUP

    def test_owner_wins_over_cashier(self):
        assert get_role(_user("both", CASHIER_GROUP, OWNER_GROUP)) == OWNER_GROUP

    def test_superuser_is_owner(self):
        admin = User.objects.create_superuser("admin", password="x")
        assert get_role(admin) == OWNER_GROUP


class TestPermissionClasses:
    def test_is_owner(self):
        assert IsOwner().has_permission(_request(_user("o", OWNER_GROUP)), None)
        assert not IsOwner().has_permission(_request(_user("k", CASHIER_GROUP)), None)

    def test_is_cashier_or_owner(self):
        permission = IsCashierOrOwner()
        assert permission.has_permission(_request(_user("o", OWNER_GROUP)), None)
        assert permission.has_permission(_request(_user("k", CASHIER_GROUP)), None)
        assert not permission.has_permission(_request(_user("g")), None)
