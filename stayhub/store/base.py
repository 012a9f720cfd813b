"""Keyed record storage contract shared by the in-memory and SQL backends."""

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, TypeVar

from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel)


class EntityKind(str, Enum):
    """Entity kinds; each has its own identifier sequence"""
    PROPERTY = "property"
    BOOKING = "booking"
    PAYMENT = "payment"
    REVIEW = "review"


class SequenceGenerator:
    """Per-kind monotonic identifier source.

    Identifiers start at ``start`` and grow by one on every call, whatever
    happens to the records they were handed to. A store owns its generator,
    so two stores never share counters.
    """

    def __init__(self, start: int = 1):
        self._start = start
        self._counters: Dict[EntityKind, int] = {}
        self._lock = threading.Lock()

    def next_id(self, kind: EntityKind) -> int:
        with self._lock:
            value = self._counters.get(kind, self._start)
            self._counters[kind] = value + 1
            return value

    def peek(self, kind: EntityKind) -> int:
        """Identifier the next call to ``next_id`` would return"""
        with self._lock:
            return self._counters.get(kind, self._start)


class EntityStore(ABC):
    """Generic keyed storage for pydantic records with an ``id`` field.

    ``update`` is a shallow merge that never touches ``id``. Every operation
    is atomic; ``transaction()`` groups several operations into one critical
    section that no other caller can interleave with.
    """

    @abstractmethod
    def put(self, kind: EntityKind, record: RecordT) -> RecordT:
        """Store ``record`` under a freshly assigned identifier"""

    @abstractmethod
    def get(self, kind: EntityKind, record_id: int) -> Optional[BaseModel]:
        """Record by identifier, or ``None``"""

    @abstractmethod
    def find_all(self, kind: EntityKind) -> List[BaseModel]:
        """All records of a kind"""

    @abstractmethod
    def update(self, kind: EntityKind, record_id: int, partial: Mapping[str, Any]) -> Optional[BaseModel]:
        """Merge ``partial`` into the record; ``None`` if the id is unknown"""

    @abstractmethod
    def delete(self, kind: EntityKind, record_id: int) -> bool:
        """Remove a record; ``False`` if it was absent"""

    @abstractmethod
    @contextmanager
    def transaction(self) -> Iterator["EntityStore"]:
        """Serialize a read-check-write sequence"""

    def count(self, kind: EntityKind) -> int:
        return len(self.find_all(kind))

    @staticmethod
    def merge(record: RecordT, partial: Mapping[str, Any]) -> RecordT:
        """Shallow merge used by every backend"""
        data = record.model_dump()
        data.update({key: value for key, value in partial.items() if key != "id"})
        return type(record).model_validate(data)
