"""Configuration management for BillSplit."""

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .allocator import DEFAULT_ROUNDING_UNIT
from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BILL_SPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Allocation
    rounding_unit: int = Field(DEFAULT_ROUNDING_UNIT, gt=0)  # minor units

    # Currency display
    decimal_places: int = Field(2, ge=0, le=6)
    currency_code: str = "IQD"  # label only, no conversion

    # CLI defaults
    default_participants: int = Field(2, ge=1)
    language: Literal["en", "ar", "tr"] = "en"


def load_settings(**overrides) -> Settings:
    """Load application settings from environment variables."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(
            f"Failed to load settings. Check the BILL_SPLIT_* environment "
            f"variables and your .env file.\n"
            f"Error: {e}"
        ) from e
