"""Category domain exceptions.

Raised by the Service Layer; the API layer translates them into
HTTP responses.
"""

from __future__ import annotations


class CategoryNotFound(Exception):
    """The requested category does not exist."""


class CategoryHasProducts(Exception):
    """The category still owns products and cannot be deleted."""
