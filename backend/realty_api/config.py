"""Application configuration using pydantic-settings."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Database
    DATABASE_URL: str
    DB_CREATE_ALL: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Loan policy overrides (defaults mirror the lending desk's current policy)
    LOAN_BASE_RATE: Decimal = Decimal("8.50")
    LOAN_RETIREMENT_AGE: int = 60
    LOAN_MAX_TENURE_YEARS: int = 30
    LOAN_MIN_TENURE_YEARS: int = 5
    LOAN_MIN_CREDIT_SCORE: int = 650

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


# Global settings instance
settings = Settings()
