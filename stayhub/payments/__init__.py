"""
Payment Settlement Module

Records one payment per booking and settles the booking when the payment
succeeds.
"""

from .service import PaymentService
from .schemas import Payment, PaymentCreate, PaymentUpdate, PaymentRecordStatus

__all__ = [
    "PaymentService",
    "Payment",
    "PaymentCreate",
    "PaymentUpdate",
    "PaymentRecordStatus"
]
