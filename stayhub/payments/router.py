from fastapi import APIRouter, Depends, HTTPException, status

from stayhub.auth.dependencies import get_current_principal
from stayhub.auth.schemas import Principal
from stayhub.dependencies import get_payment_service
from stayhub.exceptions import StayHubError, as_http_exception
from stayhub.payments.schemas import Payment, PaymentCreate, PaymentUpdate
from stayhub.payments.service import PaymentService

router = APIRouter()

@router.post("/payments", response_model=Payment, status_code=status.HTTP_201_CREATED)
def create_payment(
    request: PaymentCreate,
    principal: Principal = Depends(get_current_principal),
    service: PaymentService = Depends(get_payment_service)
):
    """Record a payment for a booking and settle it"""
    try:
        return service.create(principal, request)
    except StayHubError as e:
        raise as_http_exception(e)

@router.get("/payments/{payment_id}", response_model=Payment)
def get_payment(
    payment_id: int,
    principal: Principal = Depends(get_current_principal),
    service: PaymentService = Depends(get_payment_service)
):
    """Get payment by ID"""
    try:
        return service.require(payment_id)
    except StayHubError as e:
        raise as_http_exception(e)

@router.put("/payments/{payment_id}", response_model=Payment)
def update_payment(
    payment_id: int,
    request: PaymentUpdate,
    principal: Principal = Depends(get_current_principal),
    service: PaymentService = Depends(get_payment_service)
):
    """Transition a payment's status"""
    try:
        payment = service.update(payment_id, request)
    except StayHubError as e:
        raise as_http_exception(e)

    if not payment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment not found"
        )
    return payment

@router.get("/bookings/{booking_id}/payment", response_model=Payment)
def get_booking_payment(
    booking_id: int,
    principal: Principal = Depends(get_current_principal),
    service: PaymentService = Depends(get_payment_service)
):
    """Payment recorded for a booking (booking guest only)"""
    booking = service.booking_service.get_by_id(booking_id)
    if not booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found"
        )
    if booking.user_id != principal.user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to view this payment"
        )

    payment = service.get_by_booking(booking_id)
    if not payment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payment not found"
        )
    return payment
