"""In-memory record fetcher."""

from typing import Any

from loguru import logger

from ..core.record import Record
from ..errors import NotFoundError
from .base import BaseRecordFetcher


class InMemoryRecordFetcher(BaseRecordFetcher):
    """Serves records held in memory, keyed by record type uid.

    Every call returns deep copies, so truncation and transliteration during
    one search never leak into the stored records or into another search.

    Filters are field equality constraints; a list value means "any of".
    The filter key `id` matches the record identity. A locale restricts
    results to records whose `locale` field equals it.
    """

    def __init__(self, collections: dict[str, list[Record | dict[str, Any]]] | None = None):
        self._collections: dict[str, list[Record]] = {}
        for uid, rows in (collections or {}).items():
            self.add(uid, rows)

    def add(self, uid: str, rows: list[Record | dict[str, Any]]) -> None:
        records = [row if isinstance(row, Record) else Record.from_dict(row) for row in rows]
        self._collections.setdefault(uid, []).extend(records)
        logger.debug(f"Stored {len(records)} record(s) for {uid}")

    @staticmethod
    def _matches(record: Record, filters: dict[str, Any]) -> bool:
        for name, expected in filters.items():
            actual = record.id if name == "id" else record.get_field(name)
            if isinstance(expected, (list, tuple, set)):
                if actual not in expected:
                    return False
            elif actual != expected:
                return False
        return True

    async def find_many(
        self,
        uid: str,
        filters: dict[str, Any] | None = None,
        locale: str | None = None,
    ) -> list[Record]:
        if uid not in self._collections:
            raise NotFoundError(f"No records registered for '{uid}'", details={"uid": uid})

        constraints = dict(filters or {})
        if locale is not None:
            constraints["locale"] = locale

        return [
            record.model_copy(deep=True)
            for record in self._collections[uid]
            if self._matches(record, constraints)
        ]
