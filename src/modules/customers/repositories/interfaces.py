"""Customer repository interface.

Extends ``IRepository[Customer]`` with the phone-number look-up and the
upsert used by order intake.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional, Tuple

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_phone(self, phone_number: str) -> Optional["Customer"]:
        """Retrieve a customer by phone number (natural key)."""

    @abstractmethod
    def upsert_by_phone(
        self, phone_number: str, name: str, address: Optional[str] = None
    ) -> Tuple["Customer", bool]:
        """Create or update the customer owning *phone_number*.

        Returns ``(customer, created)``.
        """
