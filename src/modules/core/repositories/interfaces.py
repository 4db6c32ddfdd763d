"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Ordering is expressed as a sequence of field names using Django's
convention (``"name"`` ascending, ``"-name"`` descending).  Paging and
sorting are the repository's job: callers never slice result sets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Sequence, TypeVar

from shared.domain.result import Result

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def find_all(self, ordering: Sequence[str]) -> List[T]:
        """Return every entity sorted by ``ordering``."""

    @abstractmethod
    def find_page(self, page: int, size: int, ordering: Sequence[str]) -> List[T]:
        """Return the zero-based ``page`` of ``size`` entities sorted by ``ordering``.

        A page past the end of the collection is empty, not an error.
        """

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key, ``None`` when absent."""

    @abstractmethod
    def save(self, entity: T) -> Result[T]:
        """Persist (create or update) an entity.

        Data-access errors are returned as ``Failure``, never raised.
        """

    @abstractmethod
    def delete(self, id: int) -> None:
        """Remove an entity by ID.  Deleting a missing ID is a no-op."""
