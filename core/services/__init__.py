# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .demo_wallet_service import DemoWalletService, demo_wallet_service
from .portfolio_service import PortfolioService, portfolio_service
from .trending_service import TrendingService, trending_service

__all__ = [
    "DemoWalletService",
    "demo_wallet_service",
    "PortfolioService",
    "portfolio_service",
    "TrendingService",
    "trending_service",
]
