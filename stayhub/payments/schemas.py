from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum

class PaymentRecordStatus(str, Enum):
    """Status of a payment attempt"""
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"

class PaymentCreate(BaseModel):
    booking_id: int
    amount: int = Field(..., ge=0)
    currency: Optional[str] = None
    payment_method: Optional[str] = None
    upi_id: Optional[str] = None

class PaymentUpdate(BaseModel):
    status: Optional[PaymentRecordStatus] = None
    transaction_id: Optional[str] = None

class Payment(BaseModel):
    """Stored payment record"""
    id: Optional[int] = None
    booking_id: int
    amount: int
    currency: str
    payment_method: str
    upi_id: Optional[str] = None
    status: PaymentRecordStatus = PaymentRecordStatus.PENDING
    transaction_id: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    class Config:
        from_attributes = True
