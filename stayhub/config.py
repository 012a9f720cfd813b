from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Storage
    STORE_BACKEND: str = "memory"  # memory | sql
    DATABASE_URL: str = "sqlite:///./stayhub.db"

    # Security
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Booking policy
    EXCLUDE_CANCELLED_FROM_OVERLAP: bool = False
    FORBID_DELETE_WITH_ACTIVE_BOOKINGS: bool = False

    # Payments
    DEFAULT_CURRENCY: str = "INR"
    DEFAULT_PAYMENT_METHOD: str = "upi"

    # Reviews
    RATING_MIN: int = 1
    RATING_MAX: int = 5

    # Application
    PROJECT_NAME: str = "StayHub Booking Platform"
    API_V1_STR: str = "/api"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    SEED_DEMO_DATA: bool = False
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    @property
    def uses_sql_store(self) -> bool:
        return self.STORE_BACKEND.lower() == "sql"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
