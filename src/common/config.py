import os
from typing import List
from dotenv import load_dotenv
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings

# Load environment variables from the correct .env file
env_file = ".env.production" if os.getenv("APP_ENV") == "production" else ".env"
load_dotenv(env_file)

class Settings(BaseSettings):
    APP_ENV: str = "development"
    DEBUG: bool = True
    DATABASE_URL: str = "sqlite+aiosqlite:///./course_search.db"
    ALLOWED_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "info"
    RATE_LIMIT_DEFAULT: str = "60/minute"

    # Search settings
    SEARCH_CONCURRENT: bool = True
    SEARCH_ADAPTER_TIMEOUT_SECONDS: float = 5.0
    SEARCH_PREVIEW_LENGTH: int = 200
    SEARCH_TITLE_PREVIEW_LENGTH: int = 50

    # Accept comma-separated ALLOWED_ORIGINS strings
    @field_validator("ALLOWED_ORIGINS", mode="before")
    def split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("SEARCH_ADAPTER_TIMEOUT_SECONDS")
    def positive_timeout(cls, value):
        if value <= 0:
            raise ValueError("SEARCH_ADAPTER_TIMEOUT_SECONDS must be greater than zero")
        return value

    @model_validator(mode="after")
    def validate_production_database(self):
        """Refuse the local SQLite default when running in production."""
        if self.APP_ENV == "production" and self.DATABASE_URL.startswith("sqlite"):
            raise ValueError("DATABASE_URL must point at a server database in production")
        return self

settings = Settings()
