"""Interfaces of the collaborators a search depends on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config.models import RecordTypeDescriptor
    from ..core.record import Record


class BaseQueryValidator(ABC):
    """Decides whether a record type / locale combination may be searched."""

    @abstractmethod
    async def validate(self, descriptor: RecordTypeDescriptor, locale: str | None = None) -> None:
        """Validate a search request.

        Raises:
            InvalidQueryError: If the record type or locale is not searchable
        """
        pass


class BaseRecordFetcher(ABC):
    """Loads candidate records for a record type.

    No ordering guarantee is required; results are re-sorted by score.
    Each call must return records the caller may mutate.
    """

    @abstractmethod
    async def find_many(
        self,
        uid: str,
        filters: dict[str, Any] | None = None,
        locale: str | None = None,
    ) -> list[Record]:
        """Fetch records of type `uid` matching `filters` and `locale`."""
        pass
