"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """The requested order does not exist."""


class ProductNotFound(Exception):
    """A cart line references a product that does not exist."""


class InvalidPaymentStatus(Exception):
    """The requested payment status is not one of UNPAID, PAID, CANCELLED."""
