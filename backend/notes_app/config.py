"""
Application Configuration
Centralized application settings
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # MongoDB
    mongo_url: str = "mongodb://localhost:27017"
    database_id: str = "notes_app"
    notes_collection_id: str = "notes"

    # JWT
    jwt_secret: str = "your-super-secret-key-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expiration_days: int = 30

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    allowed_origins: str = "*"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Module-level instance for imports
settings = get_settings()
