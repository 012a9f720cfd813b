import logging
import secrets
import time
from typing import Any, Dict, Optional, Union

from stayhub.auth.schemas import Principal
from stayhub.bookings.schemas import BookingStatus, PaymentStatus
from stayhub.bookings.service import BookingService
from stayhub.config import settings
from stayhub.exceptions import BookingNotFound, DuplicatePayment, PaymentNotFound, PermissionDenied
from stayhub.payments.schemas import Payment, PaymentCreate, PaymentRecordStatus, PaymentUpdate
from stayhub.store import EntityKind, EntityStore

logger = logging.getLogger(__name__)


def generate_transaction_id() -> str:
    """Synthesized gateway reference, e.g. TX1718000000000A1B2"""
    return f"TX{int(time.time() * 1000)}{secrets.token_hex(2).upper()}"


class PaymentService:
    """Records payment outcomes and settles the bookings they pay for.

    There is no gateway call: a created payment is treated as settled at
    once. Settlement writes the payment and the booking inside one store
    transaction so no reader sees one without the other.
    """

    def __init__(self, store: EntityStore, booking_service: BookingService):
        self.store = store
        self.booking_service = booking_service

    def create(self, principal: Principal, request: PaymentCreate) -> Payment:
        with self.store.transaction():
            booking = self.booking_service.get_by_id(request.booking_id)
            if booking is None:
                raise BookingNotFound()

            if booking.user_id != principal.user_id:
                logger.warning("User %s may not pay for booking %s", principal.user_id, booking.id)
                raise PermissionDenied("Not authorized to make payment for this booking")

            if self.get_by_booking(booking.id) is not None:
                logger.warning("Duplicate payment attempt for booking %s", booking.id)
                raise DuplicatePayment()

            payment = Payment(
                booking_id=booking.id,
                amount=request.amount,
                currency=request.currency or settings.DEFAULT_CURRENCY,
                payment_method=request.payment_method or settings.DEFAULT_PAYMENT_METHOD,
                upi_id=request.upi_id,
                status=PaymentRecordStatus.SUCCESS,
                transaction_id=generate_transaction_id(),
            )
            created = self.store.put(EntityKind.PAYMENT, payment)
            self._settle_booking(booking.id)

        logger.info("Payment %s settled for booking %s (%s)", created.id, booking.id, created.transaction_id)
        return created

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        return self.store.get(EntityKind.PAYMENT, payment_id)

    def require(self, payment_id: int) -> Payment:
        payment = self.get_by_id(payment_id)
        if payment is None:
            raise PaymentNotFound()
        return payment

    def get_by_booking(self, booking_id: int) -> Optional[Payment]:
        for payment in self.store.find_all(EntityKind.PAYMENT):
            if payment.booking_id == booking_id:
                return payment
        return None

    def update(self, payment_id: int, partial: Union[PaymentUpdate, Dict[str, Any]]) -> Optional[Payment]:
        """Transition a payment; a transition to success settles its booking"""
        if isinstance(partial, PaymentUpdate):
            partial = partial.model_dump(exclude_unset=True, exclude_none=True)
        # The booking a payment belongs to is fixed
        partial = {k: v for k, v in partial.items() if k not in ("booking_id", "created_at")}

        with self.store.transaction():
            existing = self.get_by_id(payment_id)
            if existing is None:
                return None

            settling = (partial.get("status") == PaymentRecordStatus.SUCCESS
                        and existing.status != PaymentRecordStatus.SUCCESS)
            if settling and not (partial.get("transaction_id") or existing.transaction_id):
                partial["transaction_id"] = generate_transaction_id()

            updated = self.store.update(EntityKind.PAYMENT, payment_id, partial)
            if settling:
                self._settle_booking(updated.booking_id)

        logger.info("Payment %s updated to %s", payment_id, updated.status.value)
        return updated

    def _settle_booking(self, booking_id: int) -> None:
        """Mark the booking paid and confirmed after a successful payment"""
        settled = self.booking_service.apply_status(booking_id, {
            "payment_status": PaymentStatus.PAID,
            "status": BookingStatus.CONFIRMED,
        })
        if settled is None:
            logger.warning("Payment settled for booking %s which no longer exists", booking_id)
