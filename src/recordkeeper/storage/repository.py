"""Record repositories.

Services receive a repository per entity kind instead of reaching for a
module-level store. Records are plain dicts keyed by field name with an
integer ``id`` assigned on insert.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, List, Optional, Protocol

from recordkeeper.core.exceptions import RecordNotFoundError

Record = Dict[str, Any]
Predicate = Callable[[Record], bool]


class Repository(Protocol):
    """Storage capability used by the services."""

    entity: str

    def find(self, predicate: Optional[Predicate] = None, **equals: Any) -> List[Record]:
        """Return records matching every ``field=value`` pair and the predicate."""
        ...

    def get(self, record_id: int) -> Record:
        """Return one record; raise RecordNotFoundError if absent."""
        ...

    def insert(self, record: Record) -> Record:
        """Store a new record and return it with its assigned ``id``."""
        ...

    def update(self, record_id: int, changes: Record) -> Record:
        """Apply changes to a record and return the updated record."""
        ...

    def delete(self, record_id: int) -> None:
        """Remove a record; raise RecordNotFoundError if absent."""
        ...


class InMemoryRepository:
    """Dict-backed repository.

    Every read returns deep copies, so callers can never mutate stored
    records, and `find` materialises its result before returning. Ids are
    assigned from an increasing counter and never reused.
    """

    def __init__(self, entity: str, records: Optional[List[Record]] = None) -> None:
        self.entity = entity
        self._records: Dict[int, Record] = {}
        self._next_id = 1
        self._logger = logging.getLogger(__name__)
        for record in records or []:
            self.insert(record)

    def __len__(self) -> int:
        return len(self._records)

    def find(self, predicate: Optional[Predicate] = None, **equals: Any) -> List[Record]:
        result = []
        for record in self._records.values():
            if any(record.get(k) != v for k, v in equals.items()):
                continue
            if predicate is not None and not predicate(record):
                continue
            result.append(copy.deepcopy(record))
        return result

    def get(self, record_id: int) -> Record:
        try:
            return copy.deepcopy(self._records[record_id])
        except KeyError:
            raise RecordNotFoundError(self.entity, record_id) from None

    def insert(self, record: Record) -> Record:
        stored = copy.deepcopy(record)
        record_id = stored.get("id")
        if record_id is None:
            record_id = self._next_id
        elif record_id in self._records:
            raise ValueError(f"{self.entity} id already in use: {record_id}")
        stored["id"] = record_id
        self._next_id = max(self._next_id, int(record_id) + 1)
        self._records[record_id] = stored
        self._logger.debug("Inserted %s %s", self.entity, record_id)
        return copy.deepcopy(stored)

    def update(self, record_id: int, changes: Record) -> Record:
        if record_id not in self._records:
            raise RecordNotFoundError(self.entity, record_id)
        stored = self._records[record_id]
        for key, value in changes.items():
            if key == "id":
                continue
            stored[key] = copy.deepcopy(value)
        self._logger.debug("Updated %s %s (%s)", self.entity, record_id, ", ".join(sorted(changes)))
        return copy.deepcopy(stored)

    def delete(self, record_id: int) -> None:
        if self._records.pop(record_id, None) is None:
            raise RecordNotFoundError(self.entity, record_id)
        self._logger.debug("Deleted %s %s", self.entity, record_id)


__all__ = ["Record", "Repository", "InMemoryRepository"]
