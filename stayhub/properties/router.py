from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from stayhub.auth.dependencies import get_current_principal
from stayhub.auth.schemas import Principal
from stayhub.dependencies import get_property_service
from stayhub.exceptions import StayHubError, as_http_exception
from stayhub.properties.schemas import Property, PropertyCreate, PropertyFilters, PropertyUpdate
from stayhub.properties.service import PropertyService

router = APIRouter()

@router.get("/properties", response_model=List[Property])
def list_properties(
    property_type: Optional[str] = Query(None, description="Exact property type"),
    location: Optional[str] = Query(None, description="Case-insensitive location substring"),
    max_guests: Optional[int] = Query(None, ge=0, description="Minimum guest capacity"),
    price_per_night: Optional[int] = Query(None, ge=0, description="Maximum nightly price"),
    service: PropertyService = Depends(get_property_service)
):
    """List active properties matching the filters"""
    filters = PropertyFilters(
        property_type=property_type,
        location=location,
        max_guests=max_guests,
        price_per_night=price_per_night
    )
    return service.list_filtered(filters)

@router.get("/properties/{property_id}", response_model=Property)
def get_property(property_id: int, service: PropertyService = Depends(get_property_service)):
    """Get property by ID"""
    prop = service.get_by_id(property_id)
    if not prop:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found"
        )
    return prop

@router.post("/properties", response_model=Property, status_code=status.HTTP_201_CREATED)
def create_property(
    request: PropertyCreate,
    principal: Principal = Depends(get_current_principal),
    service: PropertyService = Depends(get_property_service)
):
    """Create a property owned by the calling host"""
    try:
        return service.create(principal, request)
    except StayHubError as e:
        raise as_http_exception(e)

@router.put("/properties/{property_id}", response_model=Property)
def update_property(
    property_id: int,
    request: PropertyUpdate,
    principal: Principal = Depends(get_current_principal),
    service: PropertyService = Depends(get_property_service)
):
    """Update a property (host only)"""
    try:
        prop = service.update(principal, property_id, request)
    except StayHubError as e:
        raise as_http_exception(e)

    if not prop:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found"
        )
    return prop

@router.delete("/properties/{property_id}")
def delete_property(
    property_id: int,
    principal: Principal = Depends(get_current_principal),
    service: PropertyService = Depends(get_property_service)
):
    """Delete a property (host only)"""
    try:
        deleted = service.delete(principal, property_id)
    except StayHubError as e:
        raise as_http_exception(e)

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Property not found"
        )
    return {"message": "Property deleted successfully"}

@router.get("/hosts/{host_id}/properties", response_model=List[Property])
def get_host_properties(host_id: int, service: PropertyService = Depends(get_property_service)):
    """All properties of a host, drafts included"""
    return service.list_by_host(host_id)
