# =============================================================================
# agents/prompts/assistant_system.py - Trading Assistant Prompts
# =============================================================================
# System prompt for the chat assistant and the prompt used to request
# structured portfolio suggestions.
#
# Usage:
#   system = ASSISTANT_SYSTEM_PROMPT
#   user = build_portfolio_analysis_prompt({"totalValue": 1000, "tokens": [...]})
# =============================================================================

from __future__ import annotations

from typing import Any

# =============================================================================
# Chat System Prompt
# =============================================================================

ASSISTANT_SYSTEM_PROMPT = """<role>
You are TradePilot AI, an expert cryptocurrency trading assistant specialized in the Solana ecosystem and OKX DEX/CEX operations.
</role>

<scope>
- ONLY respond to cryptocurrency trading, DeFi, portfolio management, and market analysis questions
- NEVER answer general programming, HTML, web development, or non-crypto questions
- If asked about anything outside crypto/trading, politely redirect to your specialized expertise
</scope>

<capabilities>
- Portfolio analysis and risk assessment
- Arbitrage opportunity identification
- Trending token analysis with social sentiment
- Trading strategy recommendations
- Market condition interpretation
</capabilities>

<expertise>
- Solana DeFi protocols (Jupiter, Raydium, Orca)
- OKX DEX/CEX price spread analysis
- Meme coin momentum trading
- Risk management strategies
- DCA (Dollar Cost Averaging) optimization
</expertise>

<formatting>
1. Keep responses CONCISE and well-structured (max 300 words)
2. Use bullet points, numbered lists and markdown headers
3. Highlight key information with **bold** text
4. Use emojis sparingly
5. Put the most important information first
</formatting>

<guidelines>
1. Provide specific, actionable advice
2. Include a brief risk warning with every suggestion
3. Reference current market data when it is provided
4. Explain the reasoning behind recommendations
5. Suggest position sizing (never more than 5-10% for high-risk plays)
6. Mention gas/slippage considerations and relevant Solana protocols
</guidelines>

<risk_warnings>
- ⚠️ High risk - only invest what you can afford to lose
- 📊 Not financial advice - DYOR
- 🌊 Market volatility and liquidity risks apply
</risk_warnings>

Tone: professional yet approachable, confident but cautious, data-driven."""


RESPONSE_INSTRUCTION = (
    "Provide a concise, well-structured response using markdown formatting. "
    "Use headers, bullet points, and bold text for clarity. "
    "Keep it under 300 words and focus on actionable insights."
)


# =============================================================================
# Context Blocks
# =============================================================================

ARBITRAGE_CONTEXT = """MARKET CONDITIONS:
- SOL: High volume arbitrage opportunity (~0.85% spread)
- BONK: Strong arbitrage potential (~4.44% spread)
- Market volatility: Moderate"""

TRENDING_CONTEXT = """TRENDING TOKENS:
- JTO: +24.5% (Trend Score: 95) - Strong social momentum
- WIF: +12.8% (Trend Score: 92) - High volume spike
- BONK: +18.2% (Trend Score: 87) - Meme momentum"""


def _num(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _signed_pct(value: Any) -> str:
    change = _num(value)
    return f"{'+' if change >= 0 else ''}{change:.2f}%"


def build_context_block(message: str, context: Any = None) -> str:
    """
    Build the context section that precedes the user's question.

    Includes the caller's portfolio when `context` carries one, plus market
    hints when the question is about arbitrage or trending tokens.
    """
    sections = []

    portfolio = context.get("portfolio") if isinstance(context, dict) else None
    if isinstance(portfolio, dict):
        lines = [
            "CURRENT PORTFOLIO:",
            f"Total Value: ${_num(portfolio.get('totalValue')):.2f}",
            "Holdings:",
        ]
        for token in portfolio.get("tokens") or []:
            lines.append(
                f"- {token.get('symbol') or 'Unknown'}: {token.get('amount') or 0} "
                f"(${_num(token.get('usdValue')):.2f}, {_signed_pct(token.get('change24h'))})"
            )
        sections.append("\n".join(lines))

    message_lower = message.lower()
    if "arbitrage" in message_lower or "spread" in message_lower:
        sections.append(ARBITRAGE_CONTEXT)
    if "trending" in message_lower or "hot" in message_lower:
        sections.append(TRENDING_CONTEXT)

    return "\n\n".join(sections)


# =============================================================================
# Portfolio Suggestions Prompt
# =============================================================================

SUGGESTIONS_TASK = """TASK: Analyze this Solana portfolio and provide 3-4 specific trading suggestions. For each suggestion, provide:
1. Action (buy/sell/hold/swap)
2. Token(s) involved
3. Clear reasoning (max 50 words)
4. Confidence level (0-100)
5. Risk level (low/medium/high)

FORMAT your response as a JSON array like this:
[
  {
    "action": "buy",
    "toToken": "USDC",
    "reason": "Increase stablecoin allocation to 25% for risk management during volatile periods.",
    "confidence": 85,
    "riskLevel": "low"
  }
]

Focus on:
- Portfolio balance and diversification
- Risk management
- Current Solana ecosystem opportunities
- Position sizing recommendations

Provide actionable, specific advice only. No disclaimers or general market commentary."""


def build_portfolio_analysis_prompt(portfolio: dict[str, Any]) -> str:
    """Describe the holdings with allocations, then ask for JSON suggestions."""
    total_value = _num(portfolio.get("totalValue"))

    lines = [
        "PORTFOLIO ANALYSIS REQUEST",
        "",
        f"Total Portfolio Value: ${total_value:.2f}",
        "",
        "Current Holdings:",
    ]
    for token in portfolio.get("tokens") or []:
        usd_value = _num(token.get("usdValue"))
        allocation = usd_value / total_value * 100 if total_value > 0 else 0.0
        lines.append(
            f"- {token.get('symbol')}: {token.get('amount')} tokens "
            f"(${usd_value:.2f}, {allocation:.1f}% allocation, {_signed_pct(token.get('change24h'))} 24h)"
        )

    return "\n".join(lines) + "\n\n" + SUGGESTIONS_TASK
