from typing import List
from pydantic import model_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env before the settings object is built so that local development
# works without exporting variables by hand.
load_dotenv()

class Settings(BaseSettings):
    """Settings for the CarLog API."""

    # API settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "CarLog API"

    # CORS settings, comma-separated
    BACKEND_CORS_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> List[str]:
        return [i.strip() for i in self.BACKEND_CORS_ORIGINS.split(",") if i.strip()]

    # Database settings
    DATABASE_URL: str = "sqlite:///./carlog.db"
    AUTO_CREATE_TABLES: bool = True

    # JWT settings. Both secrets are required: a process without them must not start.
    JWT_ACCESS_SECRET: str
    JWT_REFRESH_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    # Session settings
    MAX_REFRESH_TOKENS: int = 5
    TOKEN_WRITE_ATTEMPTS: int = 3
    BCRYPT_ROUNDS: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    @model_validator(mode="after")
    def check_secrets(self) -> "Settings":
        if not self.JWT_ACCESS_SECRET or not self.JWT_REFRESH_SECRET:
            raise ValueError("JWT_ACCESS_SECRET and JWT_REFRESH_SECRET must be set")
        if self.JWT_ACCESS_SECRET == self.JWT_REFRESH_SECRET:
            raise ValueError("JWT_ACCESS_SECRET and JWT_REFRESH_SECRET must differ")
        if self.BCRYPT_ROUNDS < 4:
            raise ValueError("BCRYPT_ROUNDS must be at least 4")
        return self

    model_config = {
        "case_sensitive": True,
        "env_file": ".env",
        "extra": "ignore",
    }

# Create settings instance
settings = Settings()
