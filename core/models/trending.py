# =============================================================================
# core/models/trending.py - Trending Token Schemas
# =============================================================================
# Supported chains and the per-token record produced by trend analysis.
#
# Chain identifiers are OKX chain indexes:
#   "1"   Ethereum
#   "56"  BNB Smart Chain
#   "501" Solana
# =============================================================================

from datetime import datetime, timezone

from pydantic import Field

from core.models.base import CamelModel

SUPPORTED_CHAINS: dict[str, str] = {
    "1": "Ethereum",
    "56": "BSC",
    "501": "Solana",
}

DEFAULT_CHAINS: list[str] = ["1", "56", "501"]

DEFAULT_TRENDING_LIMIT = 10
MIN_TRENDING_LIMIT = 1
MAX_TRENDING_LIMIT = 50


class Candle(CamelModel):
    """
    One OHLCV bar from the OKX market/candles endpoint.

    OKX returns each bar as a positional string array:
    [ts, o, h, l, c, vol, volUsd, confirm]
    """

    ts: int
    open: float
    high: float
    low: float
    close: float
    volume: float
    volume_usd: float
    confirmed: bool = True

    @classmethod
    def from_row(cls, row: list[str]) -> "Candle":
        return cls(
            ts=int(row[0]),
            open=float(row[1]),
            high=float(row[2]),
            low=float(row[3]),
            close=float(row[4]),
            volume=float(row[5]),
            volume_usd=float(row[6]),
            confirmed=len(row) < 8 or row[7] == "1",
        )


class TrendingToken(CamelModel):
    """Trend metrics for one token on one chain."""

    symbol: str
    address: str
    chain_index: str
    price: float
    change24h: float = Field(..., alias="change24h")
    volume24h: float = Field(..., alias="volume24h")
    market_cap: float
    social_mentions: int
    trend_score: float
    last_updated: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
