# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.OKX_BASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Nothing here is strictly required: a missing OpenAI or OKX key only makes
# the corresponding delegate fail at request time.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    TradePilot configuration, read from the environment and .env.

    Routes get it through SettingsDep so tests can override it; library code
    imports the module-level `settings`.
    """

    # -------------------------------------------------------------------------
    # OpenAI / LLM Configuration
    # -------------------------------------------------------------------------
    # Used by the trading assistant (chat + portfolio suggestions)

    OPENAI_API_KEY: str = Field(
        default="",
        description="OpenAI API key for the trading assistant"
    )

    OPENAI_MODEL: str = Field(
        default="gpt-4o-mini",
        description="Model used for chat responses and portfolio suggestions"
    )

    AI_TEMPERATURE: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for assistant responses"
    )

    AI_MAX_TOKENS: int = Field(
        default=600,
        ge=16,
        le=4096,
        description="Max completion tokens per assistant call"
    )

    # -------------------------------------------------------------------------
    # OKX DEX Configuration
    # -------------------------------------------------------------------------
    # Balance endpoints need signed requests; market endpoints do not

    OKX_API_KEY: str = Field(default="", description="OKX Web3 API key")

    OKX_SECRET_KEY: str = Field(default="", description="OKX Web3 secret key (HMAC signing)")

    OKX_API_PASSPHRASE: str = Field(default="", description="OKX Web3 API passphrase")

    OKX_BASE_URL: str = Field(
        default="https://web3.okx.com",
        description="Base URL of the OKX Web3 API"
    )

    OKX_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for a single OKX request"
    )

    # -------------------------------------------------------------------------
    # Portfolio
    # -------------------------------------------------------------------------

    SOLANA_WALLET_ADDRESS: str | None = Field(
        default=None,
        description="Wallet used by GET /api/portfolio when no address is given"
    )

    # -------------------------------------------------------------------------
    # Trending Cache Headers
    # -------------------------------------------------------------------------

    TRENDING_CACHE_MAX_AGE: int = Field(
        default=60,
        ge=0,
        description="s-maxage (seconds) sent with trending responses"
    )

    TRENDING_STALE_WHILE_REVALIDATE: int = Field(
        default=300,
        ge=0,
        description="stale-while-revalidate (seconds) sent with trending responses"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment; production restricts CORS"
    )

    DEBUG: bool = Field(
        default=False,
        description="DEBUG-level logging"
    )

    API_HOST: str = Field(
        default="0.0.0.0",
        description="uvicorn bind address"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="uvicorn port"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Comma-separated browser origins allowed in production"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS_ORIGINS split on commas, blanks dropped."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def trending_cache_control(self) -> str:
        """Cache-Control header value for trending responses."""
        return (
            f"public, s-maxage={self.TRENDING_CACHE_MAX_AGE}, "
            f"stale-while-revalidate={self.TRENDING_STALE_WHILE_REVALIDATE}"
        )

    @property
    def ai_configured(self) -> bool:
        return bool(self.OPENAI_API_KEY)

    @property
    def okx_configured(self) -> bool:
        return bool(self.OKX_API_KEY and self.OKX_SECRET_KEY and self.OKX_API_PASSPHRASE)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """Settings parsed once per process."""
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
