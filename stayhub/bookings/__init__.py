"""
Availability & Booking Module

Guarantees that no two bookings of a property overlap and drives booking
status transitions:

- service.py: overlap checking, booking creation and status updates
- schemas.py: Pydantic models and status enumerations

Date ranges are half-open, so a checkout day can be the next guest's
check-in day.
"""

from .service import BookingService, is_overlapping
from .schemas import (
    Booking, BookingCreate, BookingUpdate, BookingStatus, PaymentStatus, BookedRange
)

__all__ = [
    "BookingService",
    "is_overlapping",
    "Booking",
    "BookingCreate",
    "BookingUpdate",
    "BookingStatus",
    "PaymentStatus",
    "BookedRange"
]
