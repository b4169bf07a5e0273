# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for the external delegates.
# These are injected into route handlers using Depends(), which lets tests
# swap them out through app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from agents.trading_assistant import TradingAssistant, trading_assistant
from app.config import Settings, get_settings
from core.services.demo_wallet_service import DemoWalletService, demo_wallet_service
from core.services.portfolio_service import PortfolioService, portfolio_service
from core.services.trending_service import TrendingService, trending_service


def get_trading_assistant() -> TradingAssistant:
    """AI delegate for chat answers and portfolio suggestions."""
    return trading_assistant


def get_portfolio_service() -> PortfolioService:
    """Portfolio-data delegate (OKX balance APIs)."""
    return portfolio_service


def get_trending_service() -> TrendingService:
    """Multi-chain trend aggregation delegate."""
    return trending_service


def get_demo_wallet_service() -> DemoWalletService:
    return demo_wallet_service


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
AssistantDep = Annotated[TradingAssistant, Depends(get_trading_assistant)]
PortfolioServiceDep = Annotated[PortfolioService, Depends(get_portfolio_service)]
TrendingServiceDep = Annotated[TrendingService, Depends(get_trending_service)]
DemoWalletServiceDep = Annotated[DemoWalletService, Depends(get_demo_wallet_service)]
