# =============================================================================
# lib/trading_prompts.py - Canned Prompt Templates
# =============================================================================
# Starter questions offered next to the chat box.
# =============================================================================

from typing import Literal

from pydantic import BaseModel

PromptCategory = Literal["analysis", "strategy", "arbitrage", "trending"]


class PromptTemplate(BaseModel):
    id: str
    title: str
    description: str
    prompt: str
    category: PromptCategory
    icon: str


TRADING_PROMPTS: list[PromptTemplate] = [
    PromptTemplate(
        id="portfolio-analysis",
        title="Analyze My Portfolio",
        description="Get detailed analysis of your current holdings and risk assessment",
        prompt="Please analyze my current portfolio holdings. What are the risks and opportunities? Should I rebalance anything?",
        category="analysis",
        icon="📊",
    ),
    PromptTemplate(
        id="what-to-trade",
        title="What Should I Trade Today?",
        description="Get personalized trading suggestions based on market conditions",
        prompt="Based on current market conditions and my portfolio, what trading opportunities should I consider today?",
        category="strategy",
        icon="🎯",
    ),
    PromptTemplate(
        id="arbitrage-opportunities",
        title="Find Arbitrage Opportunities",
        description="Discover profitable price differences between DEX and CEX",
        prompt="Show me the best arbitrage opportunities between OKX DEX and CEX right now. Which ones have the highest profit potential?",
        category="arbitrage",
        icon="⚡",
    ),
    PromptTemplate(
        id="trending-analysis",
        title="Trending Token Analysis",
        description="Analyze trending tokens and their momentum",
        prompt="Analyze the current trending tokens. Which ones have sustainable momentum vs. which are just hype?",
        category="trending",
        icon="🔥",
    ),
    PromptTemplate(
        id="risk-management",
        title="Risk Management Strategy",
        description="Get advice on managing portfolio risk and setting stops",
        prompt="Help me create a risk management strategy for my portfolio. Where should I set stop losses and take profits?",
        category="strategy",
        icon="🛡️",
    ),
    PromptTemplate(
        id="dca-strategy",
        title="DCA Strategy",
        description="Dollar-cost averaging recommendations",
        prompt="I want to DCA into some tokens. Which ones should I consider and what schedule would you recommend?",
        category="strategy",
        icon="📈",
    ),
    PromptTemplate(
        id="meme-coin-analysis",
        title="Meme Coin Analysis",
        description="Analyze meme coins and their trading potential",
        prompt="Analyze the current meme coin landscape on Solana. Which ones have trading potential vs. which are too risky?",
        category="trending",
        icon="🐕",
    ),
    PromptTemplate(
        id="market-sentiment",
        title="Market Sentiment",
        description="Current market sentiment and what it means for trading",
        prompt="What is the current market sentiment and how should it influence my trading decisions today?",
        category="analysis",
        icon="🌡️",
    ),
]


def get_prompts_by_category(category: str) -> list[PromptTemplate]:
    return [prompt for prompt in TRADING_PROMPTS if prompt.category == category]


def get_prompt_by_id(prompt_id: str) -> PromptTemplate | None:
    return next((prompt for prompt in TRADING_PROMPTS if prompt.id == prompt_id), None)
