"""Customer model.

Customers are created implicitly by the register: the phone number is the
natural key, so checking out with a known number updates that customer
instead of creating a duplicate.  The phone number is also the WhatsApp
target for order notifications.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    phone_number = models.CharField(max_length=255, unique=True)
    name = models.CharField(max_length=255)
    address = models.TextField(blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["name"], name="customers_name_idx"),
        ]

    def __str__(self) -> str:
        suffix = self.phone_number[-4:] if self.phone_number else "????"
        return f"{self.name} (***{suffix})"
