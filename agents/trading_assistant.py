# =============================================================================
# agents/trading_assistant.py - TradePilot Trading Assistant
# =============================================================================
# The AI delegate behind the chat and portfolio-suggestion routes.
#
# - get_chat_response: guardrail check -> prompt with portfolio/market
#   context -> OpenAI -> markdown clean-up -> length cap
# - generate_portfolio_suggestions: structured JSON suggestions, with a
#   portfolio-aware heuristic set when the model's reply cannot be parsed
#
# Configuration problems and OpenAI API failures raise AIServiceError. The
# routes decide whether that becomes an HTTP 500 or a canned fallback.
#
# Usage:
#   from agents.trading_assistant import trading_assistant
#   reply = trading_assistant.get_chat_response("Should I DCA into SOL?")
# =============================================================================

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from agents.guardrails import check_message
from agents.prompts.assistant_system import (
    ASSISTANT_SYSTEM_PROMPT,
    RESPONSE_INSTRUCTION,
    build_context_block,
    build_portfolio_analysis_prompt,
)
from core.models.suggestion import RiskLevel, TradeAction, TradingSuggestion
from lib.utils import ServiceError, to_float

logger = logging.getLogger(__name__)

MAX_RESPONSE_CHARS = 2000
MAX_AI_SUGGESTIONS = 4
MAX_FALLBACK_SUGGESTIONS = 3

TRUNCATION_NOTICE = "\n\n*[Response truncated for readability]*"

JSON_ARRAY_PATTERN = re.compile(r"\[[\s\S]*?\]")


class AIServiceError(ServiceError):
    """The assistant could not produce a model response."""

    service = "openai"

    def __init__(
        self,
        message: str,
        code: str = "AI_SERVICE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


# =============================================================================
# Response Post-processing
# =============================================================================

def format_response(response: str) -> str:
    """
    Normalize model markdown.

    - One space after header hashes, followed by a blank line
    - One space after bullet and numbered-list markers
    - No runs of three or more newlines
    """
    formatted = response.strip()
    formatted = re.sub(r"^(#{1,3})(?!#)\s*(.+)$", r"\1 \2\n", formatted, flags=re.MULTILINE)
    formatted = re.sub(r"^(\s*[-*+])\s+(.+)$", r"\1 \2", formatted, flags=re.MULTILINE)
    formatted = re.sub(r"^(\s*\d+\.)\s+(.+)$", r"\1 \2", formatted, flags=re.MULTILINE)
    formatted = re.sub(r"\n{3,}", "\n\n", formatted)
    return formatted.strip()


def truncate_response(response: str, max_length: int = MAX_RESPONSE_CHARS) -> str:
    """
    Cap a response at `max_length` characters.

    Cuts at the last paragraph break, else the last sentence end, as long as
    it falls beyond 70% of the limit; otherwise cuts hard. A notice is
    appended whenever text is dropped.
    """
    if len(response) <= max_length:
        return response

    truncated = response[:max_length]
    last_paragraph = truncated.rfind("\n\n")
    last_sentence = truncated.rfind(". ")

    cut_point = max_length
    if last_paragraph > max_length * 0.7:
        cut_point = last_paragraph
    elif last_sentence > max_length * 0.7:
        cut_point = last_sentence + 1

    return truncated[:cut_point].strip() + TRUNCATION_NOTICE


# =============================================================================
# Suggestion Helpers
# =============================================================================

def _allocation_percent(tokens: list[dict], symbol: str, total_value: float) -> float:
    token = next((t for t in tokens if t.get("symbol") == symbol), None)
    if token is None or total_value <= 0:
        return 0.0
    return to_float(token.get("usdValue")) / total_value * 100


def get_fallback_suggestions(portfolio: dict[str, Any]) -> list[dict]:
    """
    Heuristic suggestions from the portfolio's SOL / USDC allocation.

    Used when the model replied but its reply held no usable JSON.
    """
    tokens = portfolio.get("tokens") or []
    total_value = to_float(portfolio.get("totalValue"))
    sol_pct = _allocation_percent(tokens, "SOL", total_value)
    usdc_pct = _allocation_percent(tokens, "USDC", total_value)

    suggestions = []

    if sol_pct > 70:
        suggestions.append(TradingSuggestion(
            action=TradeAction.SWAP,
            from_token="SOL",
            to_token="USDC",
            reason="High SOL concentration detected. Consider diversifying 20-30% into stablecoins for risk management.",
            confidence=88,
            risk_level=RiskLevel.LOW,
        ))

    if usdc_pct < 20:
        suggestions.append(TradingSuggestion(
            action=TradeAction.BUY,
            to_token="USDC",
            reason="Increase stablecoin allocation to 20-25% to provide stability during market volatility.",
            confidence=82,
            risk_level=RiskLevel.LOW,
        ))

    suggestions.append(TradingSuggestion(
        action=TradeAction.SWAP,
        from_token="SOL",
        to_token="JUP",
        reason="Jupiter showing strong fundamentals with growing DEX volume. Consider 5-10% allocation.",
        confidence=75,
        risk_level=RiskLevel.MEDIUM,
    ))

    if 0 < sol_pct < 60:
        suggestions.append(TradingSuggestion(
            action=TradeAction.HOLD,
            to_token="SOL",
            reason="Solana ecosystem remains strong. Continue DCA strategy during market dips.",
            confidence=90,
            risk_level=RiskLevel.MEDIUM,
        ))

    return [s.to_json() for s in suggestions[:MAX_FALLBACK_SUGGESTIONS]]


def parse_trading_suggestions(response_text: str, portfolio: dict[str, Any]) -> list[dict]:
    """
    Extract the first JSON array from a model reply.

    Items that fail TradingSuggestion validation are dropped. If nothing
    valid remains, heuristic suggestions are returned instead.
    """
    match = JSON_ARRAY_PATTERN.search(response_text or "")
    if match:
        try:
            raw_items = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse AI suggestions JSON: {e}")
            raw_items = []

        suggestions = []
        for item in raw_items if isinstance(raw_items, list) else []:
            try:
                suggestions.append(TradingSuggestion.model_validate(item))
            except ValidationError:
                logger.debug(f"Dropping malformed suggestion: {item!r}")

        if suggestions:
            return [s.to_json() for s in suggestions[:MAX_AI_SUGGESTIONS]]

    logger.info("AI reply had no usable suggestions, using portfolio heuristics")
    return get_fallback_suggestions(portfolio)


# =============================================================================
# Assistant
# =============================================================================

class TradingAssistant:
    """
    OpenAI-backed trading assistant.

    The OpenAI client is created on first use so the app can start without
    an API key; calls then fail with AIServiceError.
    """

    def __init__(
        self,
        client: Any = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ):
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    @property
    def client(self):
        """Get or create the OpenAI client (lazy initialization)."""
        if self._client is None:
            from openai import OpenAI
            from app.config import settings

            if not settings.OPENAI_API_KEY:
                raise AIServiceError(
                    message="AI service is not available",
                    code="AI_NOT_CONFIGURED",
                    suggestion="Set OPENAI_API_KEY in your .env file",
                )
            self._client = OpenAI(api_key=settings.OPENAI_API_KEY)
        return self._client

    def _settings(self):
        from app.config import settings
        return settings

    def _complete(self, messages: list[dict[str, str]], temperature: float | None = None) -> str:
        """Run one chat completion and return its text."""
        settings = self._settings()
        client = self.client

        try:
            response = client.chat.completions.create(
                model=self._model or settings.OPENAI_MODEL,
                messages=messages,
                temperature=temperature if temperature is not None else (
                    self._temperature if self._temperature is not None else settings.AI_TEMPERATURE
                ),
                max_tokens=self._max_tokens or settings.AI_MAX_TOKENS,
            )
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise AIServiceError(
                message=f"OpenAI request failed: {e}",
                code="AI_REQUEST_FAILED",
                suggestion="Check the OpenAI API key, quota and network connectivity",
            ) from e

        return response.choices[0].message.content or ""

    # -------------------------------------------------------------------------
    # Chat
    # -------------------------------------------------------------------------

    def get_chat_response(self, user_message: str, context: Any = None) -> str:
        """
        Answer a trading question.

        Off-topic questions get a fixed redirect without a model call.

        Args:
            user_message: The user's question
            context: Optional dict, e.g. {"portfolio": {"totalValue": ..., "tokens": [...]}}

        Returns:
            Markdown response, at most ~2000 characters

        Raises:
            AIServiceError: If the model is unavailable or the call fails
        """
        on_topic, redirect = check_message(user_message)
        if not on_topic:
            return redirect

        context_block = build_context_block(user_message, context)
        user_content = "\n\n".join(
            part for part in (context_block, f"User: {user_message}", RESPONSE_INSTRUCTION) if part
        )

        text = self._complete([
            {"role": "system", "content": ASSISTANT_SYSTEM_PROMPT},
            {"role": "user", "content": user_content},
        ])

        if not text.strip():
            return "No response generated"

        return truncate_response(format_response(text))

    # -------------------------------------------------------------------------
    # Suggestions
    # -------------------------------------------------------------------------

    def generate_portfolio_suggestions(self, portfolio: dict[str, Any]) -> list[dict]:
        """
        Ask the model for 3-4 structured suggestions for a portfolio.

        Returns:
            Up to 4 suggestion dicts (camelCase keys), or up to 3 heuristic
            ones when the reply cannot be parsed

        Raises:
            AIServiceError: If the model is unavailable or the call fails
        """
        prompt = build_portfolio_analysis_prompt(portfolio)
        text = self._complete(
            [
                {"role": "system", "content": ASSISTANT_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=0.4,
        )
        return parse_trading_suggestions(text, portfolio)


trading_assistant = TradingAssistant()
