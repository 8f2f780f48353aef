"""Base abstract models shared by the POS modules.

Provides:
- ``BaseModel``: UUIDv7 primary key + created_at / updated_at timestamps.
- ``ActiveQuerySet`` / ``ActiveManager``: ``.active()`` / ``.inactive()``
  helpers for models that carry an ``is_active`` flag.

Design decisions:
- ``objects`` returns ALL records (unfiltered).  Use ``.active()``
  explicitly where only sellable / visible rows are wanted.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

import uuid6
from django.db import models

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Active flag infrastructure
# ---------------------------------------------------------------------------


class ActiveQuerySet(models.QuerySet):
    """QuerySet with ``is_active`` helpers."""

    def active(self) -> ActiveQuerySet:
        """Return only active records."""
        return self.filter(is_active=True)

    def inactive(self) -> ActiveQuerySet:
        """Return only inactive records."""
        return self.filter(is_active=False)


class ActiveManager(models.Manager.from_queryset(ActiveQuerySet)):
    """Manager that exposes ``.active()`` / ``.inactive()`` on the queryset."""
