from fastapi import APIRouter, Depends, status
from typing import List

from stayhub.auth.dependencies import get_current_principal
from stayhub.auth.schemas import Principal
from stayhub.dependencies import get_review_service
from stayhub.exceptions import StayHubError, as_http_exception
from stayhub.reviews.schemas import Review, ReviewCreate
from stayhub.reviews.service import ReviewService

router = APIRouter()

@router.get("/properties/{property_id}/reviews", response_model=List[Review])
def get_property_reviews(property_id: int, service: ReviewService = Depends(get_review_service)):
    """Reviews posted for a property"""
    return service.list_by_property(property_id)

@router.post("/reviews", response_model=Review, status_code=status.HTTP_201_CREATED)
def create_review(
    request: ReviewCreate,
    principal: Principal = Depends(get_current_principal),
    service: ReviewService = Depends(get_review_service)
):
    """Review a completed stay; updates the property's rating"""
    try:
        return service.create(principal, request)
    except StayHubError as e:
        raise as_http_exception(e)
