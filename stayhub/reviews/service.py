import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from stayhub.auth.schemas import Principal
from stayhub.bookings.schemas import BookingStatus
from stayhub.bookings.service import BookingService
from stayhub.config import settings
from stayhub.exceptions import (
    BookingNotFound, DuplicateReview, InvalidRating, NotBookingOwner, StayNotCompleted
)
from stayhub.properties.service import PropertyService
from stayhub.reviews.schemas import Review, ReviewCreate
from stayhub.store import EntityKind, EntityStore

logger = logging.getLogger(__name__)


def compute_rating(ratings: Iterable[int]) -> Optional[str]:
    """Mean of the ratings as a two-decimal string, ``None`` when there are none"""
    ratings = list(ratings)
    if not ratings:
        return None
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return str(mean.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class ReviewService:
    """Accepts reviews of completed stays and maintains property ratings"""

    def __init__(
        self,
        store: EntityStore,
        booking_service: BookingService,
        property_service: PropertyService,
        rating_min: Optional[int] = None,
        rating_max: Optional[int] = None
    ):
        self.store = store
        self.booking_service = booking_service
        self.property_service = property_service
        self.rating_min = settings.RATING_MIN if rating_min is None else rating_min
        self.rating_max = settings.RATING_MAX if rating_max is None else rating_max

    def create(self, principal: Principal, request: ReviewCreate) -> Review:
        if not self.rating_min <= request.rating <= self.rating_max:
            raise InvalidRating(f"Rating must be between {self.rating_min} and {self.rating_max}")

        with self.store.transaction():
            booking = self.booking_service.get_by_id(request.booking_id)
            if booking is None:
                raise BookingNotFound()
            if booking.user_id != principal.user_id:
                logger.warning("User %s tried to review booking %s of another guest",
                               principal.user_id, booking.id)
                raise NotBookingOwner()
            if booking.status != BookingStatus.COMPLETED:
                logger.warning("Review rejected: booking %s is %s", booking.id, booking.status.value)
                raise StayNotCompleted()
            if any(r.booking_id == booking.id for r in self.list_by_property(booking.property_id)):
                raise DuplicateReview()

            review = Review(
                property_id=booking.property_id,
                user_id=principal.user_id,
                booking_id=booking.id,
                rating=request.rating,
                comment=request.comment,
            )
            created = self.store.put(EntityKind.REVIEW, review)
            self.recompute_rating(booking.property_id)

        logger.info("Review %s posted for property %s", created.id, created.property_id)
        return created

    def list_by_property(self, property_id: int) -> List[Review]:
        return [r for r in self.store.find_all(EntityKind.REVIEW) if r.property_id == property_id]

    def recompute_rating(self, property_id: int) -> Optional[str]:
        """Full pass over the property's reviews, written back to the catalog"""
        rating = compute_rating(r.rating for r in self.list_by_property(property_id))
        # Reviews of a deleted property keep no aggregate
        if self.property_service.update_rating(property_id, rating) is None:
            return None
        logger.info("Property %s rating recomputed to %s", property_id, rating)
        return rating
