"""Role-based permissions for the POS and back-office endpoints.

Roles are Django auth groups.  Superusers are always treated as owners.
"""

from __future__ import annotations

from typing import Optional

from rest_framework.permissions import BasePermission

OWNER_GROUP = "owner"
CASHIER_GROUP = "cashier"


def get_role(user) -> Optional[str]:
    """Return ``"owner"``, ``"cashier"`` or ``None`` for *user*."""
    if not user or not user.is_authenticated:
        return None
    if user.is_superuser:
        return OWNER_GROUP
    names = set(user.groups.values_list("name", flat=True))
    if OWNER_GROUP in names:
        return OWNER_GROUP
    if CASHIER_GROUP in names:
        return CASHIER_GROUP
    return None


class IsOwner(BasePermission):
    """Back-office access: catalog, orders and dashboard."""

    message = "Only the store owner can access this resource."

    def has_permission(self, request, view) -> bool:
        return get_role(request.user) == OWNER_GROUP


class IsCashierOrOwner(BasePermission):
    """Register access: the POS screen and order intake."""

    message = "Only cashiers or the store owner can use the register."

    def has_permission(self, request, view) -> bool:
        return get_role(request.user) in {CASHIER_GROUP, OWNER_GROUP}
