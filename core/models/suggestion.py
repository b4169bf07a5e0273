# =============================================================================
# core/models/suggestion.py - Trading Suggestion Schemas
# =============================================================================
# Suggestions produced by the trading assistant for a portfolio snapshot.
#
# FALLBACK_SUGGESTIONS is what POST /api/portfolio/suggestions returns when
# the assistant fails outright. It never changes.
# =============================================================================

from enum import Enum

from pydantic import Field

from core.models.base import CamelModel


class TradeAction(str, Enum):
    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"
    SWAP = "swap"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TradingSuggestion(CamelModel):
    """
    One advisory record.

    Example:
        {"action": "buy", "toToken": "USDC", "reason": "...",
         "confidence": 85, "riskLevel": "low"}
    """

    action: TradeAction
    from_token: str | None = None
    to_token: str
    reason: str
    confidence: int | float = Field(..., ge=0, le=100, description="0-100; whole numbers stay integers in JSON")
    expected_return: float | None = None
    risk_level: RiskLevel


FALLBACK_SUGGESTIONS: tuple[TradingSuggestion, ...] = (
    TradingSuggestion(
        action=TradeAction.HOLD,
        to_token="SOL",
        reason="Continue holding SOL with DCA strategy during market fluctuations.",
        confidence=85,
        risk_level=RiskLevel.MEDIUM,
    ),
    TradingSuggestion(
        action=TradeAction.BUY,
        to_token="USDC",
        reason="Consider increasing stablecoin allocation to 20-25% for portfolio stability.",
        confidence=78,
        risk_level=RiskLevel.LOW,
    ),
)


def fallback_suggestions() -> list[dict]:
    """JSON form of FALLBACK_SUGGESTIONS."""
    return [suggestion.to_json() for suggestion in FALLBACK_SUGGESTIONS]
