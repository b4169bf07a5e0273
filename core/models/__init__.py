# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - base.py: camelCase base model
# - wallet.py: Demo wallet
# - portfolio.py: Portfolio snapshot
# - suggestion.py: Trading suggestions + fixed fallback pair
# - trending.py: Candles, trending tokens, chain whitelist
# - chat.py: Assistant request/response bodies
#
# These models define the "contract" between API and clients.
# =============================================================================

from .base import CamelModel
from .chat import ChatRequest, ChatResponse, SuggestionsRequest
from .portfolio import Portfolio, PortfolioToken
from .suggestion import (
    FALLBACK_SUGGESTIONS,
    RiskLevel,
    TradeAction,
    TradingSuggestion,
    fallback_suggestions,
)
from .trending import (
    DEFAULT_CHAINS,
    DEFAULT_TRENDING_LIMIT,
    MAX_TRENDING_LIMIT,
    MIN_TRENDING_LIMIT,
    SUPPORTED_CHAINS,
    Candle,
    TrendingToken,
)
from .wallet import DemoToken, DemoWallet

__all__ = [
    "CamelModel",
    # Chat
    "ChatRequest",
    "ChatResponse",
    "SuggestionsRequest",
    # Portfolio
    "Portfolio",
    "PortfolioToken",
    # Suggestions
    "FALLBACK_SUGGESTIONS",
    "RiskLevel",
    "TradeAction",
    "TradingSuggestion",
    "fallback_suggestions",
    # Trending
    "DEFAULT_CHAINS",
    "DEFAULT_TRENDING_LIMIT",
    "MAX_TRENDING_LIMIT",
    "MIN_TRENDING_LIMIT",
    "SUPPORTED_CHAINS",
    "Candle",
    "TrendingToken",
    # Wallet
    "DemoToken",
    "DemoWallet",
]
