# =============================================================================
# tests/test_trending_service.py - Trend Analysis Tests
# =============================================================================

from unittest.mock import MagicMock

import pytest

from core.models.trending import Candle
from core.services.trending_service import (
    POPULAR_TOKENS,
    TrendingService,
    compute_trending_token,
    estimate_market_cap,
    estimate_social_mentions,
)
from lib.okx_client import OKXAPIError


def make_candles(
    newest_close: float,
    oldest_close: float,
    recent_volume: float = 0.0,
    older_volume: float = 0.0,
    count: int = 24,
) -> list[Candle]:
    """Hourly candles, newest first; the first 12 carry `recent_volume` each."""
    candles = []
    for i in range(count):
        close = newest_close if i == 0 else oldest_close
        candles.append(Candle(
            ts=1_700_000_000_000 - i * 3_600_000,
            open=close,
            high=close,
            low=close,
            close=close,
            volume=1.0,
            volume_usd=recent_volume if i < 12 else older_volume,
        ))
    return candles


# =============================================================================
# Metrics
# =============================================================================

class TestComputeTrendingToken:

    def test_metrics(self):
        candles = make_candles(110.0, 100.0, recent_volume=2000.0, older_volume=1000.0)

        token = compute_trending_token("SOL", "sol-mint", "501", candles)

        assert token.price == 110.0
        assert token.change24h == pytest.approx(10.0)
        assert token.volume24h == pytest.approx(36000.0)
        # 10% move * 2 + 100% volume growth * 0.5 + 3 trades * 0.1
        assert token.trend_score == pytest.approx(70.3)
        assert token.market_cap == pytest.approx(110.0 * 467_000_000)
        assert token.social_mentions == 204

    def test_falling_volume_adds_nothing(self):
        candles = make_candles(90.0, 100.0, recent_volume=0.0, older_volume=5000.0)

        token = compute_trending_token("JUP", "jup-mint", "501", candles)

        assert token.change24h == pytest.approx(-10.0)
        assert token.trend_score == pytest.approx(20.0 + 6 * 0.1)

    def test_needs_two_candles(self):
        assert compute_trending_token("SOL", "m", "501", make_candles(1.0, 1.0, count=1)) is None
        assert compute_trending_token("SOL", "m", "501", []) is None

    def test_zero_previous_close(self):
        assert compute_trending_token("SOL", "m", "501", make_candles(1.0, 0.0)) is None


class TestEstimates:

    def test_social_mentions_floor(self):
        assert estimate_social_mentions(0, 0, "UNKNOWN") == 50

    def test_social_mentions_ceiling(self):
        assert estimate_social_mentions(10_000_000_000, 90, "SOL") == 10_000

    def test_market_cap_default_supply(self):
        assert estimate_market_cap("UNKNOWN", 2.0) == 2_000_000_000


# =============================================================================
# Service
# =============================================================================

def make_service(changes: dict[str, float], failing: set[str] = frozenset()) -> TrendingService:
    """TrendingService whose fake client returns candles with the given % change per symbol."""
    addresses = {
        address: symbol
        for basket in POPULAR_TOKENS.values()
        for symbol, address in basket
    }

    def get_candlesticks(chain_index, address, bar="1H", limit=24):
        symbol = addresses[address]
        if symbol in failing:
            raise OKXAPIError(f"OKX API error for {symbol}")
        change = changes.get(symbol, 0.0)
        return make_candles(100.0 + change, 100.0)

    client = MagicMock()
    client.get_candlesticks.side_effect = get_candlesticks
    return TrendingService(client=client)


class TestTrendingService:

    def test_sorted_by_trend_score(self):
        service = make_service({"SOL": 1.0, "JUP": 8.0, "RAY": -12.0, "BONK": 4.0})

        tokens = service.analyze_trending_tokens("501")

        assert [t.symbol for t in tokens][:4] == ["RAY", "JUP", "BONK", "SOL"]
        assert len(tokens) == len(POPULAR_TOKENS["501"])
        assert all(t.chain_index == "501" for t in tokens)

    def test_requests_24_hourly_candles(self):
        service = make_service({})

        service.analyze_trending_tokens("56")

        for call in service.client.get_candlesticks.call_args_list:
            assert call.kwargs == {"bar": "1H", "limit": 24}
            assert call.args[0] == "56"

    def test_failed_token_is_skipped(self):
        service = make_service({"SOL": 5.0}, failing={"BONK"})

        tokens = service.analyze_trending_tokens("501")

        symbols = [t.symbol for t in tokens]
        assert "BONK" not in symbols
        assert len(symbols) == len(POPULAR_TOKENS["501"]) - 1

    def test_unknown_chain_is_empty(self):
        assert make_service({}).analyze_trending_tokens("999") == []

    def test_multi_chain_merges_and_ranks(self):
        service = make_service({"SOL": 3.0, "PEPE": 20.0, "CAKE": 9.0})

        tokens = service.analyze_trending_tokens_multi_chain(["1", "56", "501"])

        assert [t.symbol for t in tokens][:3] == ["PEPE", "CAKE", "SOL"]
        assert {t.chain_index for t in tokens} == {"1", "56", "501"}
        scores = [t.trend_score for t in tokens]
        assert scores == sorted(scores, reverse=True)

