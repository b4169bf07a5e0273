# =============================================================================
# core/models/portfolio.py - Portfolio Schemas
# =============================================================================
# Shape returned by GET /api/portfolio and consumed by the suggestion
# generator. Values come from OKX balance endpoints (Solana chain "501").
# =============================================================================

from datetime import datetime, timezone

from pydantic import Field

from core.models.base import CamelModel


class PortfolioToken(CamelModel):
    """Single token position with its USD value."""

    symbol: str
    address: str = Field(..., description="Token contract / mint address")
    balance: float = 0.0
    value: float = Field(default=0.0, description="balance * price in USD")
    price: float = 0.0
    change24h: float = Field(default=0.0, alias="change24h")


class Portfolio(CamelModel):
    """Wallet snapshot: total USD value plus individual positions."""

    total_value: float = 0.0
    tokens: list[PortfolioToken] = Field(default_factory=list)
    last_updated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
