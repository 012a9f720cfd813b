from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class ReviewCreate(BaseModel):
    booking_id: int
    rating: int
    comment: Optional[str] = None

class Review(BaseModel):
    """Stored review record; immutable once created"""
    id: Optional[int] = None
    property_id: int
    user_id: int
    booking_id: int
    rating: int
    comment: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    class Config:
        from_attributes = True
