from sqlalchemy import Column, Integer, String, DateTime, Text, JSON
from stayhub.database import Base

# Identifiers are never reused, so SQLite tables use AUTOINCREMENT
_NO_ID_REUSE = {"sqlite_autoincrement": True}

# ================================
# Properties
# ================================
class PropertyRow(Base):
    __tablename__ = "properties"
    __table_args__ = _NO_ID_REUSE

    id = Column(Integer, primary_key=True, index=True)
    host_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    latitude = Column(String(32))
    longitude = Column(String(32))
    price_per_night = Column(Integer, nullable=False)
    bedrooms = Column(Integer, nullable=False)
    bathrooms = Column(Integer, nullable=False)
    max_guests = Column(Integer, nullable=False)
    property_type = Column(String(100), nullable=False)
    images = Column(JSON, nullable=False, default=list)
    amenities = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default="active")
    rating = Column(String(10))
    created_at = Column(DateTime, nullable=False)

# ================================
# Bookings & Payments
# ================================
class BookingRow(Base):
    __tablename__ = "bookings"
    __table_args__ = _NO_ID_REUSE

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    check_in_date = Column(DateTime, nullable=False)
    check_out_date = Column(DateTime, nullable=False)
    number_of_guests = Column(Integer, nullable=False)
    total_price = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default="pending")
    payment_status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime, nullable=False)

class PaymentRow(Base):
    __tablename__ = "payments"
    __table_args__ = _NO_ID_REUSE

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, nullable=False, unique=True, index=True)
    amount = Column(Integer, nullable=False)
    currency = Column(String(10), nullable=False)
    payment_method = Column(String(50), nullable=False)
    upi_id = Column(String(255))
    status = Column(String(20), nullable=False, default="pending")
    transaction_id = Column(String(100))
    created_at = Column(DateTime, nullable=False)

# ================================
# Reviews
# ================================
class ReviewRow(Base):
    __tablename__ = "reviews"
    __table_args__ = _NO_ID_REUSE

    id = Column(Integer, primary_key=True, index=True)
    property_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False)
    booking_id = Column(Integer, nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    created_at = Column(DateTime, nullable=False)
