"""Typed failures raised by the booking core.

Every error is a rejection of a single operation: services validate before
they write, so raising one of these never leaves a partial mutation behind.
Routers translate them to HTTP responses using ``status_code``.
"""

from fastapi import HTTPException


class StayHubError(ValueError):
    """Base class for business-rule failures (HTTP 400)."""

    status_code = 400
    default_detail = "Request rejected"

    def __init__(self, detail: str = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotFoundError(StayHubError):
    status_code = 404
    default_detail = "Not found"


class PropertyNotFound(NotFoundError):
    default_detail = "Property not found"


class BookingNotFound(NotFoundError):
    default_detail = "Booking not found"


class PaymentNotFound(NotFoundError):
    default_detail = "Payment not found"


class PermissionDenied(StayHubError):
    status_code = 403
    default_detail = "Not authorized to perform this action"


class NotBookingOwner(PermissionDenied):
    default_detail = "Can only review properties you've booked"


class InvalidDateRange(StayHubError):
    default_detail = "Check-out date must be after check-in date"


class DateConflict(StayHubError):
    default_detail = "Selected dates are not available"


class DuplicatePayment(StayHubError):
    default_detail = "Payment already exists for this booking"


class StayNotCompleted(StayHubError):
    default_detail = "Can only review after completing your stay"


class InvalidRating(StayHubError):
    default_detail = "Rating is out of range"


class PropertyHasActiveBookings(StayHubError):
    default_detail = "Property has active bookings and cannot be deleted"


class DuplicateReview(StayHubError):
    default_detail = "This stay has already been reviewed"


def as_http_exception(error: StayHubError) -> HTTPException:
    """Translate a core failure for the HTTP layer"""
    return HTTPException(status_code=error.status_code, detail=error.detail)
