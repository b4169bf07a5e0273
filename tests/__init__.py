# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the TradePilot API:
# - test_*_routes.py: HTTP contract tests with mocked delegates
# - test_trading_assistant.py: guardrails, prompt handling, suggestion parsing
# - test_trending_service.py: trend metrics over fake candles
# - test_okx_client.py: request signing and envelope handling
# - test_device.py, test_demo_wallet.py, test_models.py: pure units
#
# Run tests with: pytest
# =============================================================================
