"""FastAPI dependencies wiring the store into the domain services.

The store is a process-wide singleton built from settings; tests replace it
through ``app.dependency_overrides[get_store]``.
"""

import logging
import threading
from typing import Optional

from fastapi import Depends

from stayhub.bookings.service import BookingService
from stayhub.config import Settings, settings
from stayhub.database import create_session_factory
from stayhub.payments.service import PaymentService
from stayhub.properties.service import PropertyService
from stayhub.reviews.service import ReviewService
from stayhub.seed import create_seed_data
from stayhub.store import EntityKind, EntityStore, MemoryEntityStore
from stayhub.store.sql import SqlEntityStore

logger = logging.getLogger(__name__)

_store: Optional[EntityStore] = None
_store_lock = threading.Lock()


def build_store(config: Settings = settings) -> EntityStore:
    """Create the store selected by ``STORE_BACKEND``"""
    if config.uses_sql_store:
        logger.info("Using SQL entity store at %s", config.DATABASE_URL)
        return SqlEntityStore(create_session_factory(config.DATABASE_URL))

    logger.info("Using in-memory entity store")
    return MemoryEntityStore()


def get_store() -> EntityStore:
    """Process-wide store; the demo catalog is loaded into an empty one when SEED_DEMO_DATA is set"""
    global _store
    with _store_lock:
        if _store is None:
            store = build_store()
            if settings.SEED_DEMO_DATA and store.count(EntityKind.PROPERTY) == 0:
                create_seed_data(store)
            _store = store
        return _store


def get_property_service(store: EntityStore = Depends(get_store)) -> PropertyService:
    return PropertyService(store)


def get_booking_service(
    store: EntityStore = Depends(get_store),
    property_service: PropertyService = Depends(get_property_service)
) -> BookingService:
    return BookingService(store, property_service)


def get_payment_service(
    store: EntityStore = Depends(get_store),
    booking_service: BookingService = Depends(get_booking_service)
) -> PaymentService:
    return PaymentService(store, booking_service)


def get_review_service(
    store: EntityStore = Depends(get_store),
    booking_service: BookingService = Depends(get_booking_service),
    property_service: PropertyService = Depends(get_property_service)
) -> ReviewService:
    return ReviewService(store, booking_service, property_service)
