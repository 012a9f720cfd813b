"""Demo catalog: one host with two active listings and a draft."""

import logging
from typing import List

from stayhub.auth.schemas import Principal
from stayhub.properties.schemas import Property, PropertyCreate, PropertyStatus
from stayhub.properties.service import PropertyService
from stayhub.store import EntityStore

logger = logging.getLogger(__name__)

DEMO_HOST = Principal(user_id=1, is_host=True, name="Demo Host")

DEMO_PROPERTIES = [
    {
        "title": "Spacious Beachside Villa in Goa",
        "description": "Four-bedroom villa with a private pool, a short drive from the beaches.",
        "location": "North Goa, Goa, India",
        "latitude": "15.5074",
        "longitude": "73.8278",
        "price_per_night": 12000,
        "bedrooms": 4,
        "bathrooms": 3,
        "max_guests": 8,
        "property_type": "Villa",
        "images": ["https://images.example.com/goa-villa-1.jpg"],
        "amenities": ["Private pool", "WiFi", "Air conditioning", "Kitchen", "Free parking"],
        "status": PropertyStatus.ACTIVE,
        "rating": "4.92",
    },
    {
        "title": "Modern Apartment with Sea View",
        "description": "Sea-facing apartment in central Mumbai close to the business districts.",
        "location": "Mumbai, Maharashtra, India",
        "latitude": "19.0760",
        "longitude": "72.8777",
        "price_per_night": 8500,
        "bedrooms": 2,
        "bathrooms": 2,
        "max_guests": 4,
        "property_type": "Apartment",
        "images": ["https://images.example.com/mumbai-apartment-1.jpg"],
        "amenities": ["Sea view", "WiFi", "Air conditioning", "Kitchen", "Gym"],
        "status": PropertyStatus.ACTIVE,
        "rating": "4.78",
    },
    {
        "title": "Luxury Houseboat in Kerala",
        "description": "Traditional houseboat cruising the Alleppey backwaters with an onboard chef.",
        "location": "Alleppey, Kerala, India",
        "latitude": "9.4981",
        "longitude": "76.3388",
        "price_per_night": 15000,
        "bedrooms": 3,
        "bathrooms": 2,
        "max_guests": 6,
        "property_type": "Houseboat",
        "images": ["https://images.example.com/kerala-houseboat-1.jpg"],
        "amenities": ["Onboard dining", "Air conditioning", "Private deck", "WiFi"],
        "status": PropertyStatus.DRAFT,
    },
]


def create_seed_data(store: EntityStore) -> List[Property]:
    """Seed the demo properties into ``store``"""
    service = PropertyService(store)
    created = []
    for data in DEMO_PROPERTIES:
        data = dict(data)
        rating = data.pop("rating", None)
        prop = service.create(DEMO_HOST, PropertyCreate(**data))
        if rating:
            # Demo listings ship with a historical rating
            prop = service.update_rating(prop.id, rating)
        created.append(prop)

    logger.info("Seeded %d demo properties for host %s", len(created), DEMO_HOST.user_id)
    return created
