"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Nivesh"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./data/nivesh.sqlite"

    # User used when a request carries no X-User-Id header
    default_user_id: str = "demo-user"

    # Spot rates (per gram) used until the user sets their own
    default_gold_rate: float = 7500.0
    default_silver_rate: float = 90.0

    # Live FD accrual always compounds quarterly unless this is enabled
    fd_accrual_honors_interest_type: bool = False

    # Display
    currency_symbol: str = "₹"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    frontend_url: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
