# =============================================================================
# core/services/trending_service.py - Trending Token Analysis
# =============================================================================
# Ranks a fixed basket of popular tokens per chain by "trend score", computed
# from the last 24 hourly OKX candles:
#
#   trend_score = |change24h| * 2
#               + max(0, volume_change24h) * 0.5
#               + estimated_trade_count * 0.1
#
# Market cap and social mentions are estimates (known supplies, volume and
# volatility heuristics) until real supply/social feeds are wired in.
#
# Usage:
#   tokens = trending_service.analyze_trending_tokens_multi_chain(["1", "501"])
# =============================================================================

import logging
import math

from core.models.trending import Candle, TrendingToken
from lib.okx_client import OKXClient, get_okx_client

logger = logging.getLogger(__name__)


# =============================================================================
# Token Baskets
# =============================================================================

POPULAR_TOKENS: dict[str, list[tuple[str, str]]] = {
    "501": [
        ("SOL", "So11111111111111111111111111111111111111112"),
        ("JUP", "JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN"),
        ("RAY", "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R"),
        ("BONK", "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"),
        ("WIF", "EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm"),
        ("PYTH", "HZ1JovNiVvGrGNiiYvEozEVgZ58xaU3RKwX8eACQBCt3"),
    ],
    "1": [
        ("WETH", "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"),
        ("UNI", "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"),
        ("LINK", "0x514910771AF9Ca656af840dff83E8264EcF986CA"),
        ("PEPE", "0x6982508145454Ce325dDbE47a25d4ec3d2311933"),
        ("SHIB", "0x95aD61b0a150d79219dCF64E1E6Cc01f0B64C4cE"),
    ],
    "56": [
        ("WBNB", "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c"),
        ("CAKE", "0x0E09FaBB73Bd3Ade0a17ECC321fD13a19e81cE82"),
        ("XVS", "0xcF6BB5389c92Bdda8a3747Ddb454cB7a64626C63"),
    ],
}

# Approximate circulating supplies used for market cap estimates
CIRCULATING_SUPPLY: dict[str, float] = {
    "SOL": 467_000_000,
    "JUP": 10_000_000_000,
    "RAY": 555_000_000,
    "ORCA": 100_000_000,
    "JTO": 1_000_000_000,
    "BONK": 75_000_000_000_000,
    "WIF": 998_926_393,
    "PYTH": 10_000_000_000,
    "MNGO": 10_000_000_000,
    "WETH": 120_000_000,
    "UNI": 600_000_000,
    "LINK": 600_000_000,
    "PEPE": 420_690_000_000_000,
    "SHIB": 589_000_000_000_000,
    "WBNB": 145_000_000,
    "CAKE": 290_000_000,
    "XVS": 16_500_000,
}
DEFAULT_SUPPLY = 1_000_000_000

# How much chatter a token attracts relative to its volume
POPULARITY_MULTIPLIER: dict[str, float] = {
    "SOL": 1.5,
    "JUP": 1.3,
    "RAY": 1.2,
    "BONK": 1.4,
    "WIF": 1.4,
    "PYTH": 1.1,
    "ORCA": 1.1,
    "JTO": 1.0,
    "MNGO": 1.0,
    "USDC": 0.7,
    "WETH": 1.5,
    "UNI": 1.2,
    "LINK": 1.2,
    "PEPE": 1.4,
    "SHIB": 1.4,
    "WBNB": 1.3,
    "CAKE": 1.1,
    "XVS": 1.0,
}

MIN_SOCIAL_MENTIONS = 50
MAX_SOCIAL_MENTIONS = 10_000

# One trade per $10k of volume
VOLUME_PER_TRADE = 10_000


# =============================================================================
# Heuristics
# =============================================================================

def estimate_market_cap(symbol: str, price: float) -> float:
    return price * CIRCULATING_SUPPLY.get(symbol, DEFAULT_SUPPLY)


def estimate_social_mentions(volume24h: float, change24h: float, symbol: str) -> int:
    """
    Estimate social mentions from volume and volatility.

    Big volume and big moves both generate discussion. The result is clamped
    to [50, 10000].
    """
    volume_component = math.floor(volume24h / VOLUME_PER_TRADE)
    volatility_component = abs(change24h) * 10
    multiplier = POPULARITY_MULTIPLIER.get(symbol, 1.0)

    mentions = math.floor((volume_component + volatility_component) * multiplier) + MIN_SOCIAL_MENTIONS
    return min(max(mentions, MIN_SOCIAL_MENTIONS), MAX_SOCIAL_MENTIONS)


def compute_trending_token(
    symbol: str,
    address: str,
    chain_index: str,
    candles: list[Candle],
) -> TrendingToken | None:
    """
    Derive trend metrics from hourly candles (newest first).

    Returns None when there are fewer than two candles or the oldest close
    is zero, since no 24h change can be computed.
    """
    if len(candles) < 2:
        return None

    current_price = candles[0].close
    previous_price = candles[-1].close
    if previous_price == 0:
        return None

    change24h = (current_price - previous_price) / previous_price * 100
    volume24h = sum(c.volume_usd for c in candles)

    recent_volume = sum(c.volume_usd for c in candles[:12])
    older_volume = sum(c.volume_usd for c in candles[12:])
    volume_change24h = (recent_volume - older_volume) / older_volume * 100 if older_volume > 0 else 0.0

    trade_count24h = math.floor(volume24h / VOLUME_PER_TRADE)

    trend_score = abs(change24h) * 2
    trend_score += max(0.0, volume_change24h) * 0.5
    trend_score += trade_count24h * 0.1

    return TrendingToken(
        symbol=symbol,
        address=address,
        chain_index=chain_index,
        price=current_price,
        change24h=change24h,
        volume24h=volume24h,
        market_cap=estimate_market_cap(symbol, current_price),
        social_mentions=estimate_social_mentions(volume24h, change24h, symbol),
        trend_score=trend_score,
    )


# =============================================================================
# Service
# =============================================================================

class TrendingService:
    """
    Trend analysis over OKX candle data.

    Example:
        service = TrendingService()
        ranked = service.analyze_trending_tokens_multi_chain(["1", "501"])
    """

    def __init__(self, client: OKXClient | None = None):
        self._client = client

    @property
    def client(self) -> OKXClient:
        # Injected client, else the shared one (reset by close_okx_client on shutdown)
        if self._client is not None:
            return self._client
        return get_okx_client()

    def analyze_trending_tokens(self, chain_index: str = "501") -> list[TrendingToken]:
        """
        Score every token in the chain's basket, highest trend score first.

        A token whose candles cannot be fetched is logged and skipped.
        """
        tokens = POPULAR_TOKENS.get(chain_index, [])
        logger.info(f"Analyzing {len(tokens)} tokens on chain {chain_index} for trending data")

        results: list[TrendingToken] = []
        for symbol, address in tokens:
            try:
                candles = self.client.get_candlesticks(chain_index, address, bar="1H", limit=24)
                token = compute_trending_token(symbol, address, chain_index, candles)
            except Exception as e:
                logger.error(f"Error analyzing {symbol} on chain {chain_index}: {e}")
                continue
            if token is not None:
                results.append(token)

        return sorted(results, key=lambda t: t.trend_score, reverse=True)

    def analyze_trending_tokens_multi_chain(self, chain_indices: list[str]) -> list[TrendingToken]:
        """Merge per-chain results and rank them together by trend score."""
        merged: list[TrendingToken] = []
        for chain_index in chain_indices:
            chain_tokens = self.analyze_trending_tokens(chain_index)
            logger.info(f"Chain {chain_index}: {len(chain_tokens)} trending tokens")
            merged.extend(chain_tokens)

        return sorted(merged, key=lambda t: t.trend_score, reverse=True)


trending_service = TrendingService()
