"""Library configuration using pydantic-settings."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jupquote.quote import DEFAULT_SLIPPAGE_BPS


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Quote service
    # ======================
    jupiter_api_url: str = Field(
        default="https://quote-api.jup.ag/v6", description="Quote API base URL"
    )
    jupiter_api_key: Optional[str] = Field(
        default=None, description="Optional API key for higher rate limits"
    )
    default_slippage_bps: int = Field(
        default=DEFAULT_SLIPPAGE_BPS, ge=0, le=10000, description="Default slippage (50 = 0.5%)"
    )

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug logging")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "jupiter_api_url": self.jupiter_api_url,
            "jupiter_api_key": "***" if self.jupiter_api_key else "(not set)",
            "default_slippage_bps": self.default_slippage_bps,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(debug: Optional[bool] = None) -> None:
    """Set up root logging for applications embedding the library."""
    if debug is None:
        debug = get_settings().debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
