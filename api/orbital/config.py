"""
Application Configuration - Environment Variables & Settings
"""
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables
    """
    # Application
    APP_NAME: str = Field(default="Orbital Getaways API")
    DEBUG: bool = Field(default=False)

    # Seed the store with the demo catalog on startup
    SEED_DEMO_DATA: bool = Field(default=True)

    # Booking rules
    MAX_TRAVELERS: int = Field(default=10)
    # Reject bookings whose return date is before the departure date
    ENFORCE_DATE_ORDER: bool = Field(default=True)
    # Use the strict status table (cancelled is terminal) instead of any-to-any
    STRICT_STATUS_TRANSITIONS: bool = Field(default=False)

    # Cache - Redis (empty disables caching)
    REDIS_URL: str = Field(default="")
    CACHE_TTL_CATALOG: int = Field(default=3600)  # 1 hour

    # CORS - stored as comma-separated string
    ALLOWED_ORIGINS_STR: str = Field(
        default="http://localhost:3000,http://localhost:5000,http://localhost:5173",
        alias="ALLOWED_ORIGINS"
    )

    @computed_field
    @property
    def ALLOWED_ORIGINS(self) -> List[str]:
        """Parse comma-separated origins into list"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS_STR.split(',') if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance
    """
    return Settings()
