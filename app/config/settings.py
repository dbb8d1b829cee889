"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Display currencies offered by the dashboard (code -> symbol)
CURRENCIES: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
    "NPR": "Rs.",
}

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/network.log"
    log_rotation: str = "1 day"
    log_retention: str = "7 days"

    # Network
    strict_validation: bool = Field(
        default=False,
        description="Reject duplicate ids and negative values on mutation"
    )
    seed_demo_network: bool = Field(
        default=True,
        description="Start sessions from the demo network instead of a bare root"
    )
    root_node_id: str = Field(default="root", min_length=1)
    root_node_name: str = "You"
    node_id_length: int = Field(
        default=9, ge=1, le=32, description="Length of generated recruit ids"
    )

    # Display
    default_currency: str = "USD"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level against loguru level names."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}"
            )
        return level

    @field_validator('default_currency')
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Validate currency code."""
        code = v.upper()
        if code not in CURRENCIES:
            raise ValueError(
                f"DEFAULT_CURRENCY must be one of {', '.join(CURRENCIES)}"
            )
        return code

    @model_validator(mode='after')
    def validate_production(self) -> 'Settings':
        """Force strict validation outside development."""
        if self.environment == "production" and not self.strict_validation:
            logger.warning(
                "Strict network validation enabled for production environment"
            )
            self.strict_validation = True
        return self

    def get_currency_symbol(self, code: str | None = None) -> str:
        """Get display symbol for a currency code (default currency if None)."""
        return CURRENCIES[(code or self.default_currency).upper()]


# Global settings instance
settings = Settings()
