# =============================================================================
# app/routers/chat.py - Trading Assistant Chat Endpoints
# =============================================================================
# POST /api/chat           {message, context?} -> {response}
# GET  /api/chat/prompts   canned starter prompts
# GET  /api/chat/prompts/{prompt_id}
#
# One delegated call per request, no retry. Any assistant failure is
# reported as a generic 500.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from app.dependencies import AssistantDep
from app.exceptions import DelegateFailureError, InvalidRequestError, PromptNotFoundError
from core.models.chat import ChatRequest, ChatResponse
from lib.trading_prompts import (
    PromptCategory,
    PromptTemplate,
    TRADING_PROMPTS,
    get_prompt_by_id,
    get_prompts_by_category,
)
from lib.utils import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ChatResponse)
def chat(request: ChatRequest, assistant: AssistantDep):
    """
    Ask the trading assistant a question.

    Pass `context.portfolio` to get answers grounded in your holdings.
    Off-topic questions receive a redirect instead of an answer.
    """
    if not request.message:
        raise InvalidRequestError(
            "Message is required",
            suggestion="Send a JSON body like {\"message\": \"Should I buy SOL?\"}",
        )

    try:
        response = assistant.get_chat_response(request.message, request.context)
    except ServiceError as e:
        logger.error(f"Chat API error from {e.service}: {e}")
        raise DelegateFailureError("Failed to get chat response")
    except Exception as e:
        logger.exception(f"Chat API error: {e}")
        raise DelegateFailureError("Failed to get chat response")

    return ChatResponse(response=response)


@router.get("/prompts", response_model=list[PromptTemplate])
async def list_prompts(
    category: Annotated[PromptCategory | None, Query(description="Filter by prompt category")] = None,
):
    """List starter prompts, optionally for one category."""
    if category:
        return get_prompts_by_category(category)
    return TRADING_PROMPTS


@router.get("/prompts/{prompt_id}", response_model=PromptTemplate)
async def get_prompt(prompt_id: str):
    """One starter prompt by id, e.g. `dca-strategy`."""
    prompt = get_prompt_by_id(prompt_id)
    if prompt is None:
        raise PromptNotFoundError(prompt_id)
    return prompt
