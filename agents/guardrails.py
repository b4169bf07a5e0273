# =============================================================================
# agents/guardrails.py - Conversation Guardrails
# =============================================================================
# Keeps the assistant on crypto trading topics.
#
# Classification is purely local (regex + keyword lists), so off-topic
# messages never cost a model call:
# 1. Known off-topic patterns (web dev, SQL, small talk) are rejected
# 2. Otherwise the message needs a trading/crypto/platform/risk keyword or a
#    common trading phrase
# 3. Messages under 10 characters must contain a keyword
# =============================================================================

import logging
import re

logger = logging.getLogger(__name__)


# =============================================================================
# Topic Lists
# =============================================================================

OFF_TOPIC_PATTERNS = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"make.*html.*page",
        r"create.*html",
        r"build.*website",
        r"web.*development",
        r"javascript.*tutorial",
        r"css.*styling",
        r"react.*component",
        r"node\.js",
        r"python.*script",
        r"sql.*query",
        r"database",
        r"hello.*world",
        r"how.*are.*you",
        r"what.*is.*your.*name",
    )
]

TRADING_KEYWORDS = [
    "trade", "trading", "buy", "sell", "swap", "exchange",
    "portfolio", "balance", "holdings", "investment", "invest",
    "price", "market", "arbitrage", "spread", "profit", "loss",
    "strategy", "analysis", "forecast", "prediction", "chart",
    "technical analysis", "fundamental analysis",
]

CRYPTO_KEYWORDS = [
    "crypto", "cryptocurrency", "bitcoin", "btc", "ethereum", "eth",
    "solana", "sol", "usdc", "usdt", "token", "coin", "defi",
    "dex", "cex", "liquidity", "yield", "staking", "farming",
    "blockchain", "wallet", "address", "transaction", "hash",
]

PLATFORM_KEYWORDS = [
    "okx", "jupiter", "raydium", "orca", "serum", "jup",
    "bonk", "jto", "wif", "meme", "trending", "hot",
    "dca", "dollar cost averaging", "pump", "dump", "moon",
]

RISK_KEYWORDS = [
    "risk", "stop loss", "take profit", "leverage", "margin",
    "volatility", "slippage", "gas", "fee", "commission",
    "liquidation", "position size", "risk management",
]

ALL_KEYWORDS = TRADING_KEYWORDS + CRYPTO_KEYWORDS + PLATFORM_KEYWORDS + RISK_KEYWORDS

TRADING_PHRASES = [
    "how much should i", "should i buy", "should i sell",
    "what do you think about", "price target", "market analysis",
    "trading advice", "investment advice", "portfolio review",
    "risk management", "profit taking", "entry point", "exit strategy",
    "when to buy", "when to sell", "market sentiment", "bull market",
    "bear market", "crypto market", "defi protocol", "yield farming",
]

SHORT_MESSAGE_LENGTH = 10


# =============================================================================
# Redirect Message
# =============================================================================

OFF_TOPIC_RESPONSE = """🤖 **I'm TradePilot AI** - your specialized cryptocurrency trading assistant!

I'm designed to help with:
• **Portfolio Analysis** - Review your crypto holdings and performance
• **Trading Strategies** - Solana ecosystem and OKX platform insights
• **Market Opportunities** - Arbitrage, trending tokens, and DeFi plays
• **Risk Management** - Position sizing and stop-loss recommendations

**Please ask me about:**
- Cryptocurrency trading and analysis
- Solana ecosystem (SOL, Jupiter, Raydium, etc.)
- OKX DEX/CEX opportunities
- Portfolio optimization and risk management
- DeFi strategies and trending tokens

For general questions outside of crypto trading, I'd recommend using a general-purpose AI assistant. Let's focus on maximizing your trading potential! 📈"""


# =============================================================================
# Classification
# =============================================================================

def is_on_topic(message: str) -> bool:
    """
    Check whether a message is about crypto trading.

    Examples:
        is_on_topic("Should I buy more SOL?")   # True
        is_on_topic("Build a website for me")   # False
        is_on_topic("hi")                       # False (short, no keyword)
    """
    text = message.lower().strip()

    if any(pattern.search(text) for pattern in OFF_TOPIC_PATTERNS):
        return False

    has_keyword = any(keyword in text for keyword in ALL_KEYWORDS)

    if len(text) < SHORT_MESSAGE_LENGTH:
        return has_keyword

    return has_keyword or any(phrase in text for phrase in TRADING_PHRASES)


def check_message(message: str) -> tuple[bool, str | None]:
    """
    Check if a message is on-topic and return the redirect if not.

    Returns:
        Tuple of (is_on_topic, redirect_message_or_none)

    Usage:
        on_topic, redirect = check_message(user_message)
        if not on_topic:
            return redirect
    """
    if is_on_topic(message):
        return True, None

    logger.info(f"Off-topic message redirected: '{message[:50]}'")
    return False, OFF_TOPIC_RESPONSE
