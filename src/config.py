"""Configuration module using Pydantic Settings."""

from pathlib import Path

from pydantic import Field, BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.models.money import Currency


class DenominationConfig(BaseModel):
    # Note face values loaded in the cash depot, per currency
    pl: list[int] = Field(
        default=[500, 200, 100, 50, 20, 10], description="Polish zloty notes"
    )
    eur: list[int] = Field(
        default=[500, 200, 100, 50, 20, 10, 5], description="Euro notes"
    )
    usd: list[int] = Field(
        default=[100, 50, 20, 10, 5, 2, 1], description="US dollar notes"
    )

    def as_table(self) -> dict[Currency, list[int]]:
        """Return the notes keyed by currency, skipping empty entries."""
        return {
            currency: list(getattr(self, currency.value.lower()))
            for currency in Currency
            if getattr(self, currency.value.lower(), None)
        }


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    denominations: DenominationConfig = DenominationConfig()

    atm_id: str = Field(default="atm-001", description="Identifier of this ATM in audit logs")

    # PII masking
    mask_with_presidio: bool = Field(
        default=True, description="Run Presidio over free text before logging it"
    )

    # Paths
    audit_log_dir: Path = Field(
        default=Path("logs"), description="Directory for withdrawal audit files"
    )
    log_level: str = Field(default="INFO", description="Logging level")


# Global settings instance
settings = Settings()
