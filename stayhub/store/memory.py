import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional

from pydantic import BaseModel

from stayhub.store.base import EntityKind, EntityStore, RecordT, SequenceGenerator


class MemoryEntityStore(EntityStore):
    """Transient dict-backed store.

    All access goes through one re-entrant lock. A failing transaction
    restores the records it started from; identifiers handed out inside it
    stay consumed.
    """

    def __init__(self, sequence: Optional[SequenceGenerator] = None):
        self._sequence = sequence or SequenceGenerator()
        self._records: Dict[EntityKind, Dict[int, BaseModel]] = {kind: {} for kind in EntityKind}
        self._lock = threading.RLock()
        self._depth = 0

    @property
    def sequence(self) -> SequenceGenerator:
        return self._sequence

    @contextmanager
    def transaction(self) -> Iterator["MemoryEntityStore"]:
        with self._lock:
            snapshot = None
            if self._depth == 0:
                snapshot = {kind: dict(records) for kind, records in self._records.items()}
            self._depth += 1
            try:
                yield self
            except BaseException:
                if snapshot is not None:
                    self._records = snapshot
                raise
            finally:
                self._depth -= 1

    def put(self, kind: EntityKind, record: RecordT) -> RecordT:
        with self._lock:
            record_id = self._sequence.next_id(kind)
            stored = record.model_copy(update={"id": record_id}, deep=True)
            self._records[kind][record_id] = stored
            return stored.model_copy(deep=True)

    def get(self, kind: EntityKind, record_id: int) -> Optional[BaseModel]:
        with self._lock:
            record = self._records[kind].get(record_id)
            return record.model_copy(deep=True) if record is not None else None

    def find_all(self, kind: EntityKind) -> List[BaseModel]:
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records[kind].values()]

    def update(self, kind: EntityKind, record_id: int, partial: Mapping[str, Any]) -> Optional[BaseModel]:
        with self._lock:
            record = self._records[kind].get(record_id)
            if record is None:
                return None
            merged = self.merge(record, partial)
            self._records[kind][record_id] = merged
            return merged.model_copy(deep=True)

    def delete(self, kind: EntityKind, record_id: int) -> bool:
        with self._lock:
            return self._records[kind].pop(record_id, None) is not None

    def count(self, kind: EntityKind) -> int:
        with self._lock:
            return len(self._records[kind])
