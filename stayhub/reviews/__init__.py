from .service import ReviewService, compute_rating
from .schemas import Review, ReviewCreate

__all__ = ["ReviewService", "compute_rating", "Review", "ReviewCreate"]
