"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Payment Instruction Processor"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"

    supported_currencies: str = Field(
        default="NGN,USD,GBP,GHS",
        description="Comma-separated currency codes accepted in instructions",
    )
    timezone: Optional[str] = Field(
        default=None,
        description="IANA zone that defines 'today' for scheduling; system local time when unset",
    )

    log_level: str = "INFO"
    log_json: bool = False

    def currency_set(self) -> frozenset[str]:
        """Parse supported currencies into an uppercase set."""

        return frozenset(code.strip().upper() for code in self.supported_currencies.split(",") if code.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance for dependency injection."""

    return Settings()
