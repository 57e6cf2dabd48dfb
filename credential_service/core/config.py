from pydantic_settings import BaseSettings, SettingsConfigDict
import secrets
import os

class Settings(BaseSettings):
    # Environment
    ENVIRONMENT: str = "development"

    # Security
    JWT_SECRET_KEY: str = os.environ.get("JWT_SECRET_KEY", secrets.token_urlsafe(32))
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", env_file_encoding="utf-8", extra="ignore")

# Global instance
settings = Settings()
