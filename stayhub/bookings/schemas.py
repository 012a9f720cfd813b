from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime, timezone
from enum import Enum

class BookingStatus(str, Enum):
    """Booking status enumeration"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

class PaymentStatus(str, Enum):
    """Payment status of a booking"""
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"

def to_naive_utc(value: datetime) -> datetime:
    """Stay dates are compared as naive UTC; offsets are folded in"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value

# Booking Request Models
class BookingCreate(BaseModel):
    """Request to reserve a property for a date range"""
    property_id: int
    check_in_date: datetime
    check_out_date: datetime
    number_of_guests: int = Field(..., ge=1)
    total_price: int = Field(..., ge=0)

    @field_validator('check_in_date', 'check_out_date')
    @classmethod
    def normalize_dates(cls, v):
        return to_naive_utc(v)

class BookingUpdate(BaseModel):
    """Post-creation changes; only the two status fields are mutable"""
    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None

# Booking Response Models
class Booking(BaseModel):
    """Stored booking record"""
    id: Optional[int] = None
    property_id: int
    user_id: int
    check_in_date: datetime
    check_out_date: datetime
    number_of_guests: int
    total_price: int
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator('check_in_date', 'check_out_date')
    @classmethod
    def normalize_dates(cls, v):
        return to_naive_utc(v)

    class Config:
        from_attributes = True

class BookedRange(BaseModel):
    """Public view of a booking: dates and status only"""
    check_in_date: datetime
    check_out_date: datetime
    status: BookingStatus
