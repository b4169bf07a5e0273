# =============================================================================
# tests/test_models.py - Model, Config and Utility Tests
# =============================================================================

import re

import pytest
from pydantic import ValidationError

from agents.trading_assistant import AIServiceError
from app.config import Settings
from app.exceptions import DelegateFailureError, InvalidRequestError, NoTrendingTokensError
from core.models import (
    FALLBACK_SUGGESTIONS,
    Candle,
    RiskLevel,
    TradeAction,
    TradingSuggestion,
    TrendingToken,
    fallback_suggestions,
)
from lib.okx_client import OKXAPIError
from lib.trading_prompts import TRADING_PROMPTS, get_prompt_by_id, get_prompts_by_category
from lib.utils import ServiceError, to_float, utc_now_iso


# =============================================================================
# Suggestions
# =============================================================================

class TestTradingSuggestion:

    def test_camel_case_round_trip(self):
        suggestion = TradingSuggestion.model_validate({
            "action": "swap",
            "fromToken": "SOL",
            "toToken": "JUP",
            "reason": "Rotate",
            "confidence": 75,
            "riskLevel": "medium",
        })

        assert suggestion.action == TradeAction.SWAP
        assert suggestion.from_token == "SOL"
        assert suggestion.risk_level == RiskLevel.MEDIUM
        assert suggestion.to_json() == {
            "action": "swap",
            "fromToken": "SOL",
            "toToken": "JUP",
            "reason": "Rotate",
            "confidence": 75,
            "riskLevel": "medium",
        }

    def test_confidence_keeps_number_type(self):
        whole = TradingSuggestion(action="buy", to_token="SOL", reason="r", confidence=85, risk_level="low")
        fractional = TradingSuggestion(action="buy", to_token="SOL", reason="r", confidence=72.5, risk_level="low")

        assert whole.to_json()["confidence"] == 85
        assert isinstance(whole.to_json()["confidence"], int)
        assert fractional.to_json()["confidence"] == 72.5

    @pytest.mark.parametrize("confidence", [-1, 100.5])
    def test_confidence_bounds(self, confidence):
        with pytest.raises(ValidationError):
            TradingSuggestion(
                action="buy", to_token="SOL", reason="r", confidence=confidence, risk_level="low"
            )

    def test_fallback_pair(self):
        assert len(FALLBACK_SUGGESTIONS) == 2
        data = fallback_suggestions()
        assert [(s["action"], s["toToken"], s["confidence"], s["riskLevel"]) for s in data] == [
            ("hold", "SOL", 85, "medium"),
            ("buy", "USDC", 78, "low"),
        ]
        assert all("fromToken" not in s for s in data)


# =============================================================================
# Trending
# =============================================================================

class TestTrendingModels:

    def test_candle_from_row(self):
        candle = Candle.from_row(["1700000000000", "1.0", "1.2", "0.9", "1.1", "500", "550", "1"])

        assert candle.ts == 1_700_000_000_000
        assert candle.close == 1.1
        assert candle.volume_usd == 550.0
        assert candle.confirmed is True

    def test_candle_row_without_confirm_flag(self):
        assert Candle.from_row(["1", "1", "1", "1", "1", "1", "1"]).confirmed is True

    def test_trending_token_json_keys(self):
        token = TrendingToken(
            symbol="SOL",
            address="So11111111111111111111111111111111111111112",
            chain_index="501",
            price=150.0,
            change24h=3.2,
            volume24h=1_000_000.0,
            market_cap=70_000_000_000.0,
            social_mentions=900,
            trend_score=42.0,
        )

        data = token.to_json()

        assert set(data) == {
            "symbol", "address", "chainIndex", "price", "change24h", "volume24h",
            "marketCap", "socialMentions", "trendScore", "lastUpdated",
        }


# =============================================================================
# Errors
# =============================================================================

class TestErrors:

    def test_invalid_request_shape(self):
        error = InvalidRequestError("Limit must be between 1 and 50", details={"limit": "0"})

        assert error.status_code == 400
        assert error.to_dict() == {
            "success": False,
            "error": "Limit must be between 1 and 50",
            "code": "INVALID_REQUEST",
            "details": {"limit": "0"},
        }

    def test_delegate_failure_hides_detail_by_default(self):
        error = DelegateFailureError("Failed to get chat response")

        assert error.status_code == 500
        assert "details" not in error.to_dict()

    def test_delegate_failure_with_detail(self):
        error = DelegateFailureError("Failed to fetch multi-chain trending tokens", detail="timeout")

        assert error.to_dict()["details"] == "timeout"

    def test_no_trending_tokens(self):
        error = NoTrendingTokensError(["56"])

        assert error.status_code == 404
        assert error.to_dict()["error"] == "No trending tokens found"


# =============================================================================
# Config
# =============================================================================

class TestSettings:

    def test_cache_control(self):
        settings = Settings(TRENDING_CACHE_MAX_AGE=30, TRENDING_STALE_WHILE_REVALIDATE=120)

        assert settings.trending_cache_control == "public, s-maxage=30, stale-while-revalidate=120"

    def test_cors_origins_list(self):
        settings = Settings(CORS_ORIGINS="http://localhost:3000, https://tradepilot.app")

        assert settings.cors_origins_list == ["http://localhost:3000", "https://tradepilot.app"]

    def test_delegate_flags(self):
        settings = Settings(OPENAI_API_KEY="", OKX_API_KEY="k", OKX_SECRET_KEY="s", OKX_API_PASSPHRASE="p")

        assert settings.ai_configured is False
        assert settings.okx_configured is True


# =============================================================================
# Utilities
# =============================================================================

class TestUtils:

    def test_utc_now_iso_format(self):
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_now_iso())

    @pytest.mark.parametrize("value,expected", [("1.5", 1.5), (2, 2.0), ("", 0.0), (None, 0.0), ("abc", 0.0)])
    def test_to_float(self, value, expected):
        assert to_float(value) == expected

    def test_prompt_lookup(self):
        assert len(TRADING_PROMPTS) == 8
        assert get_prompt_by_id("dca-strategy").category == "strategy"
        assert get_prompt_by_id("missing") is None
        assert len(get_prompts_by_category("strategy")) == 3


class TestServiceErrors:

    def test_service_tags(self):
        assert OKXAPIError("down").service == "okx"
        assert AIServiceError("down").service == "openai"

    def test_str_includes_code_and_suggestion(self):
        error = ServiceError("boom", code="X_FAILED", suggestion="retry later")

        assert str(error) == "[X_FAILED] boom (retry later)"
