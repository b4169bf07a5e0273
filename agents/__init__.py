# =============================================================================
# agents/ - AI Assistant
# =============================================================================
# This package contains the OpenAI-backed trading assistant:
# - trading_assistant.py: chat answers and portfolio suggestions
# - guardrails.py: local on-topic classification and redirect reply
#
# Prompts:
# - prompts/assistant_system.py: system prompt and prompt builders
# =============================================================================

from agents.guardrails import check_message, is_on_topic
from agents.trading_assistant import (
    AIServiceError,
    TradingAssistant,
    trading_assistant,
)

__all__ = [
    # Guardrails
    "check_message",
    "is_on_topic",
    # Assistant
    "AIServiceError",
    "TradingAssistant",
    "trading_assistant",
]
