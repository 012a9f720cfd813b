import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from stayhub.auth.schemas import Principal
from stayhub.bookings.schemas import (
    BookedRange, Booking, BookingCreate, BookingStatus, BookingUpdate, PaymentStatus, to_naive_utc
)
from stayhub.config import settings
from stayhub.exceptions import DateConflict, InvalidDateRange, PermissionDenied
from stayhub.properties.service import PropertyService
from stayhub.store import EntityKind, EntityStore

logger = logging.getLogger(__name__)

# Fields that may change after a booking is created
MUTABLE_FIELDS = ("status", "payment_status")


def is_overlapping(start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime) -> bool:
    """Half-open interval overlap: a checkout may coincide with the next check-in"""
    return start_a < end_b and start_b < end_a


class BookingService:
    """Availability and booking lifecycle for properties.

    Creation holds the store's transaction across the overlap check and the
    insert, so two concurrent requests can never both pass the check against
    the same snapshot.
    """

    def __init__(
        self,
        store: EntityStore,
        property_service: PropertyService,
        exclude_cancelled_from_overlap: Optional[bool] = None
    ):
        self.store = store
        self.property_service = property_service
        if exclude_cancelled_from_overlap is None:
            exclude_cancelled_from_overlap = settings.EXCLUDE_CANCELLED_FROM_OVERLAP
        self.exclude_cancelled_from_overlap = exclude_cancelled_from_overlap

    def create(self, principal: Principal, request: BookingCreate) -> Booking:
        """Reserve a property for the calling guest"""
        with self.store.transaction():
            self.property_service.require(request.property_id)

            if request.check_out_date <= request.check_in_date:
                logger.warning("Rejected booking with check-out %s not after check-in %s",
                               request.check_out_date, request.check_in_date)
                raise InvalidDateRange()

            conflict = self.find_conflict(request.property_id, request.check_in_date, request.check_out_date)
            if conflict is not None:
                logger.warning("Booking request for property %s conflicts with booking %s",
                               request.property_id, conflict.id)
                raise DateConflict()

            booking = Booking(
                user_id=principal.user_id,
                status=BookingStatus.PENDING,
                payment_status=PaymentStatus.PENDING,
                **request.model_dump()
            )
            created = self.store.put(EntityKind.BOOKING, booking)

        logger.info("Booking %s created for property %s by user %s",
                    created.id, created.property_id, principal.user_id)
        return created

    def find_conflict(self, property_id: int, check_in: datetime, check_out: datetime) -> Optional[Booking]:
        """First existing booking whose range overlaps the given one"""
        check_in, check_out = to_naive_utc(check_in), to_naive_utc(check_out)
        for existing in self.list_by_property(property_id):
            if self.exclude_cancelled_from_overlap and existing.status == BookingStatus.CANCELLED:
                continue
            if is_overlapping(check_in, check_out, existing.check_in_date, existing.check_out_date):
                return existing
        return None

    def is_available(self, property_id: int, check_in: datetime, check_out: datetime) -> bool:
        check_in, check_out = to_naive_utc(check_in), to_naive_utc(check_out)
        return check_in < check_out and self.find_conflict(property_id, check_in, check_out) is None

    def get_by_id(self, booking_id: int) -> Optional[Booking]:
        return self.store.get(EntityKind.BOOKING, booking_id)

    def list_by_user(self, user_id: int) -> List[Booking]:
        return [b for b in self.store.find_all(EntityKind.BOOKING) if b.user_id == user_id]

    def list_by_property(self, property_id: int) -> List[Booking]:
        return [b for b in self.store.find_all(EntityKind.BOOKING) if b.property_id == property_id]

    def availability(self, property_id: int) -> List[BookedRange]:
        """Booked date ranges of a property without guest details"""
        return [
            BookedRange(check_in_date=b.check_in_date, check_out_date=b.check_out_date, status=b.status)
            for b in self.list_by_property(property_id)
        ]

    def update(
        self,
        principal: Principal,
        booking_id: int,
        partial: Union[BookingUpdate, Dict[str, Any]]
    ) -> Optional[Booking]:
        """Change a booking's status; allowed for its guest and the property's host"""
        with self.store.transaction():
            booking = self.get_by_id(booking_id)
            if booking is None:
                return None

            prop = self.property_service.get_by_id(booking.property_id)
            is_host = prop is not None and prop.host_id == principal.user_id
            if booking.user_id != principal.user_id and not is_host:
                logger.warning("User %s may not update booking %s", principal.user_id, booking_id)
                raise PermissionDenied("Not authorized to update this booking")

            return self.apply_status(booking_id, partial)

    def apply_status(self, booking_id: int, partial: Union[BookingUpdate, Dict[str, Any]]) -> Optional[Booking]:
        """Internal status transition used by settlement and stay completion"""
        if isinstance(partial, BookingUpdate):
            partial = partial.model_dump(exclude_unset=True, exclude_none=True)
        changes = {k: v for k, v in partial.items() if k in MUTABLE_FIELDS}

        updated = self.store.update(EntityKind.BOOKING, booking_id, changes)
        if updated is not None and changes:
            logger.info("Booking %s now %s / %s", booking_id, updated.status.value, updated.payment_status.value)
        return updated

    def complete_stay(self, booking_id: int) -> Optional[Booking]:
        """Mark a stay as completed, which makes it eligible for review"""
        return self.apply_status(booking_id, {"status": BookingStatus.COMPLETED})
