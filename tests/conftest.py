from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from stayhub.auth.schemas import Principal
from stayhub.auth.utils import create_access_token
from stayhub.bookings.schemas import BookingCreate
from stayhub.bookings.service import BookingService
from stayhub.dependencies import get_store
from stayhub.main import app
from stayhub.payments.service import PaymentService
from stayhub.properties.schemas import PropertyCreate
from stayhub.properties.service import PropertyService
from stayhub.reviews.service import ReviewService
from stayhub.store import MemoryEntityStore

HOST = Principal(user_id=100, is_host=True, name="Host")
OTHER_HOST = Principal(user_id=101, is_host=True, name="Other Host")
GUEST = Principal(user_id=200, name="Guest")
OTHER_GUEST = Principal(user_id=300, name="Other Guest")

# ---------- TEST FIXTURES ----------

@pytest.fixture
def store():
    """A fresh in-memory store per test; counters are never shared."""
    return MemoryEntityStore()

@pytest.fixture
def property_service(store):
    return PropertyService(store, forbid_delete_with_active_bookings=False)

@pytest.fixture
def booking_service(store, property_service):
    return BookingService(store, property_service, exclude_cancelled_from_overlap=False)

@pytest.fixture
def payment_service(store, booking_service):
    return PaymentService(store, booking_service)

@pytest.fixture
def review_service(store, booking_service, property_service):
    return ReviewService(store, booking_service, property_service, rating_min=1, rating_max=5)

@pytest.fixture
def client(store):
    """Override the store dependency for FastAPI TestClient."""
    app.dependency_overrides[get_store] = lambda: store
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()

# ---------- TEST DATA HELPERS ----------

def property_payload(title="Beach Villa", location="North Goa, Goa, India", max_guests=6,
                     price_per_night=10000, property_type="Villa", status="active"):
    return {
        "title": title,
        "description": "A lovely place to stay",
        "location": location,
        "latitude": "15.5074",
        "longitude": "73.8278",
        "price_per_night": price_per_night,
        "bedrooms": 3,
        "bathrooms": 2,
        "max_guests": max_guests,
        "property_type": property_type,
        "images": ["https://images.example.com/1.jpg"],
        "amenities": ["WiFi", "Kitchen"],
        "status": status,
    }

def booking_payload(property_id, check_in, check_out, guests=2, total_price=50000):
    return {
        "property_id": property_id,
        "check_in_date": check_in,
        "check_out_date": check_out,
        "number_of_guests": guests,
        "total_price": total_price,
    }

@pytest.fixture
def make_property(property_service):
    def _make(principal=HOST, **overrides):
        return property_service.create(principal, PropertyCreate(**property_payload(**overrides)))
    return _make

@pytest.fixture
def make_booking(booking_service):
    def _make(property_id, check_in=datetime(2024, 6, 10), check_out=datetime(2024, 6, 15), principal=GUEST):
        request = BookingCreate(**booking_payload(property_id, check_in, check_out))
        return booking_service.create(principal, request)
    return _make

@pytest.fixture
def auth_headers():
    def _headers(principal):
        token = create_access_token(principal.user_id, is_host=principal.is_host)
        return {"Authorization": f"Bearer {token}"}
    return _headers
