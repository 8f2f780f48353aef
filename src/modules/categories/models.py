"""Category model.

Categories group the products shown on the POS screen.  They use a plain
numeric id and carry no timestamps.  A category that still owns products
cannot be deleted (enforced at service layer); deactivate it instead.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import ActiveManager


class Category(models.Model):
    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=100)
    is_active = models.BooleanField(default=True)

    objects = ActiveManager()

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name
