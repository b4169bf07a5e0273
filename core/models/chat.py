# =============================================================================
# core/models/chat.py - Chat Schemas
# =============================================================================
# Request/response bodies for the assistant routes.
#
# Required fields are declared optional here on purpose: a missing field must
# surface as InvalidRequestError with a route-specific message, not as a
# generic validation error.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Body of POST /api/chat."""

    message: str | None = Field(
        default=None,
        description="User question for the trading assistant",
        examples=["Should I rebalance my SOL position?"],
    )
    context: Any = Field(
        default=None,
        description="Optional context, e.g. {\"portfolio\": {...}}",
    )


class ChatResponse(BaseModel):
    """Body returned by POST /api/chat."""

    response: str


class SuggestionsRequest(BaseModel):
    """Body of POST /api/portfolio/suggestions."""

    portfolio: dict[str, Any] | None = Field(
        default=None,
        description="Portfolio snapshot: {totalValue, tokens: [...]}",
    )
