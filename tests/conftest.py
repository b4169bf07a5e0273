# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides a TestClient plus mocked delegates wired through
#   app.dependency_overrides
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from agents.trading_assistant import TradingAssistant
from app.config import Settings, get_settings
from app.dependencies import (
    get_portfolio_service,
    get_trading_assistant,
    get_trending_service,
)
from app.main import app
from core.models.trending import TrendingToken
from core.services.portfolio_service import PortfolioService
from core.services.trending_service import TrendingService


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def client():
    """TestClient with dependency overrides cleared after each test."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_assistant():
    """MagicMock TradingAssistant injected into the app."""
    assistant = MagicMock(spec=TradingAssistant)
    app.dependency_overrides[get_trading_assistant] = lambda: assistant
    return assistant


@pytest.fixture
def mock_portfolio_service():
    service = MagicMock(spec=PortfolioService)
    app.dependency_overrides[get_portfolio_service] = lambda: service
    return service


@pytest.fixture
def mock_trending_service():
    service = MagicMock(spec=TrendingService)
    app.dependency_overrides[get_trending_service] = lambda: service
    return service


@pytest.fixture
def override_settings():
    """
    Replace settings for one test.

    Usage:
        override_settings(SOLANA_WALLET_ADDRESS="7xKX...")
    """
    def _override(**values) -> Settings:
        test_settings = Settings(**values)
        app.dependency_overrides[get_settings] = lambda: test_settings
        return test_settings

    return _override


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def sample_portfolio_dict():
    """Portfolio snapshot as the frontend sends it."""
    return {
        "totalValue": 10000.0,
        "tokens": [
            {"symbol": "SOL", "amount": 50, "usdValue": 7500.0, "change24h": 2.5},
            {"symbol": "USDC", "amount": 1000, "usdValue": 1000.0, "change24h": 0.0},
            {"symbol": "BONK", "amount": 50000000, "usdValue": 1500.0, "change24h": -4.2},
        ],
    }


@pytest.fixture
def make_trending_tokens():
    """Factory for ranked TrendingToken lists."""
    def _make(count: int, chain_index: str = "501") -> list[TrendingToken]:
        return [
            TrendingToken(
                symbol=f"TKN{i}",
                address=f"address-{i}",
                chain_index=chain_index,
                price=1.0 + i,
                change24h=5.0,
                volume24h=100000.0,
                market_cap=1_000_000.0,
                social_mentions=100,
                trend_score=float(count - i),
            )
            for i in range(count)
        ]

    return _make
