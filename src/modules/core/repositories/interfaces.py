"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that every
module-specific repository interface extends.  Services depend on this
abstraction, never on the Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, Optional, TypeVar, Union

T = TypeVar("T")

EntityId = Union[str, int]


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` is the entity managed by the repository
    (``Category``, ``Product``, ``Customer``, ``Order``).  Ids are UUID
    strings except for categories, which use numeric ids.
    """

    @abstractmethod
    def get_by_id(self, id: EntityId) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` when missing."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> Iterable[T]:
        """List entities with optional ORM look-ups."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: EntityId) -> bool:
        """Remove an entity by ID; ``False`` when it does not exist."""
