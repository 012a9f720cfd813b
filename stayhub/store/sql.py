import threading
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session, sessionmaker

from stayhub.bookings.schemas import Booking
from stayhub.models import BookingRow, PaymentRow, PropertyRow, ReviewRow
from stayhub.payments.schemas import Payment
from stayhub.properties.schemas import Property
from stayhub.reviews.schemas import Review
from stayhub.store.base import EntityKind, EntityStore, RecordT

ROW_MODELS: Dict[EntityKind, Type] = {
    EntityKind.PROPERTY: PropertyRow,
    EntityKind.BOOKING: BookingRow,
    EntityKind.PAYMENT: PaymentRow,
    EntityKind.REVIEW: ReviewRow,
}

RECORD_SCHEMAS: Dict[EntityKind, Type[BaseModel]] = {
    EntityKind.PROPERTY: Property,
    EntityKind.BOOKING: Booking,
    EntityKind.PAYMENT: Payment,
    EntityKind.REVIEW: Review,
}


def _column_values(record: BaseModel) -> Dict[str, Any]:
    values = record.model_dump(exclude={"id"})
    return {key: (value.value if isinstance(value, Enum) else value) for key, value in values.items()}


class SqlEntityStore(EntityStore):
    """SQLAlchemy-backed store with the same contract as the in-memory one.

    Identifiers come from the database sequence. Operations outside a
    ``transaction()`` commit on their own; inside one they share a session
    that commits (or rolls back) when the outermost block exits.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory
        self._lock = threading.RLock()
        self._active: Optional[Session] = None

    @contextmanager
    def transaction(self) -> Iterator["SqlEntityStore"]:
        with self._lock:
            if self._active is not None:
                yield self
                return
            session = self._session_factory()
            self._active = session
            try:
                yield self
                session.commit()
            except BaseException:
                session.rollback()
                raise
            finally:
                self._active = None
                session.close()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        with self.transaction():
            yield self._active

    def _to_record(self, kind: EntityKind, row) -> BaseModel:
        return RECORD_SCHEMAS[kind].model_validate(row)

    def put(self, kind: EntityKind, record: RecordT) -> RecordT:
        with self._session() as session:
            row = ROW_MODELS[kind](**_column_values(record))
            session.add(row)
            session.flush()
            return self._to_record(kind, row)

    def get(self, kind: EntityKind, record_id: int) -> Optional[BaseModel]:
        with self._session() as session:
            row = session.get(ROW_MODELS[kind], record_id)
            return self._to_record(kind, row) if row is not None else None

    def find_all(self, kind: EntityKind) -> List[BaseModel]:
        model = ROW_MODELS[kind]
        with self._session() as session:
            rows = session.query(model).order_by(model.id).all()
            return [self._to_record(kind, row) for row in rows]

    def update(self, kind: EntityKind, record_id: int, partial: Mapping[str, Any]) -> Optional[BaseModel]:
        with self._session() as session:
            row = session.get(ROW_MODELS[kind], record_id)
            if row is None:
                return None
            merged = self.merge(self._to_record(kind, row), partial)
            for field, value in _column_values(merged).items():
                setattr(row, field, value)
            session.flush()
            return self._to_record(kind, row)

    def delete(self, kind: EntityKind, record_id: int) -> bool:
        with self._session() as session:
            row = session.get(ROW_MODELS[kind], record_id)
            if row is None:
                return False
            session.delete(row)
            session.flush()
            return True

    def count(self, kind: EntityKind) -> int:
        with self._session() as session:
            return session.query(ROW_MODELS[kind]).count()
