from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from stayhub.auth.dependencies import get_current_principal, get_optional_principal
from stayhub.auth.schemas import Principal
from stayhub.bookings.schemas import Booking, BookingCreate, BookingUpdate
from stayhub.bookings.service import BookingService
from stayhub.dependencies import get_booking_service
from stayhub.exceptions import StayHubError, as_http_exception

router = APIRouter()

@router.get("/bookings", response_model=List[Booking])
def get_user_bookings(
    principal: Principal = Depends(get_current_principal),
    service: BookingService = Depends(get_booking_service)
):
    """Bookings made by the calling guest"""
    return service.list_by_user(principal.user_id)

@router.post("/bookings", response_model=Booking, status_code=status.HTTP_201_CREATED)
def create_booking(
    request: BookingCreate,
    principal: Principal = Depends(get_current_principal),
    service: BookingService = Depends(get_booking_service)
):
    """Reserve a property for a date range"""
    try:
        return service.create(principal, request)
    except StayHubError as e:
        raise as_http_exception(e)

@router.get("/bookings/{booking_id}", response_model=Booking)
def get_booking(
    booking_id: int,
    principal: Principal = Depends(get_current_principal),
    service: BookingService = Depends(get_booking_service)
):
    """Get booking details by ID (guest or host only)"""
    booking = service.get_by_id(booking_id)
    if not booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found"
        )

    prop = service.property_service.get_by_id(booking.property_id)
    if booking.user_id != principal.user_id and (prop is None or prop.host_id != principal.user_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to view this booking"
        )
    return booking

@router.put("/bookings/{booking_id}", response_model=Booking)
def update_booking(
    booking_id: int,
    request: BookingUpdate,
    principal: Principal = Depends(get_current_principal),
    service: BookingService = Depends(get_booking_service)
):
    """Change booking status (guest or host only)"""
    try:
        booking = service.update(principal, booking_id, request)
    except StayHubError as e:
        raise as_http_exception(e)

    if not booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found"
        )
    return booking

@router.get("/properties/{property_id}/bookings")
def get_property_bookings(
    property_id: int,
    principal: Optional[Principal] = Depends(get_optional_principal),
    service: BookingService = Depends(get_booking_service)
):
    """Full bookings for the property's host, booked date ranges for anyone else"""
    prop = service.property_service.get_by_id(property_id)
    if principal is not None and prop is not None and prop.host_id == principal.user_id:
        return service.list_by_property(property_id)
    return service.availability(property_id)
