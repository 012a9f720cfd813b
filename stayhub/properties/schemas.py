from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from enum import Enum

class PropertyStatus(str, Enum):
    """Property lifecycle status"""
    ACTIVE = "active"
    DRAFT = "draft"
    INACTIVE = "inactive"

class PropertyBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str
    location: str = Field(..., min_length=1)
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    price_per_night: int = Field(..., gt=0)
    bedrooms: int = Field(..., ge=0)
    bathrooms: int = Field(..., ge=0)
    max_guests: int = Field(..., ge=0)
    property_type: str
    images: List[str] = []
    amenities: List[str] = []
    status: PropertyStatus = PropertyStatus.ACTIVE

    @field_validator('amenities')
    @classmethod
    def dedupe_amenities(cls, v):
        # Amenities behave as a set of labels; keep first-seen order
        return list(dict.fromkeys(v))

class PropertyCreate(PropertyBase):
    pass

class PropertyUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    location: Optional[str] = Field(None, min_length=1)
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    price_per_night: Optional[int] = Field(None, gt=0)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    max_guests: Optional[int] = Field(None, ge=0)
    property_type: Optional[str] = None
    images: Optional[List[str]] = None
    amenities: Optional[List[str]] = None
    status: Optional[PropertyStatus] = None

class Property(PropertyBase):
    """Stored property record"""
    id: Optional[int] = None
    host_id: int
    rating: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)

    class Config:
        from_attributes = True

class PropertyFilters(BaseModel):
    """Listing criteria; unset or falsy criteria do not constrain the result"""
    property_type: Optional[str] = None
    location: Optional[str] = None
    max_guests: Optional[int] = None
    price_per_night: Optional[int] = None
