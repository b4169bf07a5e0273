# =============================================================================
# app/routers/portfolio.py - Portfolio Endpoints
# =============================================================================
# GET  /api/portfolio              wallet snapshot from OKX
# POST /api/portfolio/suggestions  AI suggestions for a snapshot
#
# The suggestions route never fails because of the assistant: if it raises,
# the fixed fallback pair is returned with HTTP 200.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from app.dependencies import AssistantDep, PortfolioServiceDep, SettingsDep
from app.exceptions import DelegateFailureError, InvalidRequestError
from core.models.chat import SuggestionsRequest
from core.models.suggestion import fallback_suggestions
from lib.utils import ServiceError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def get_portfolio(
    service: PortfolioServiceDep,
    settings: SettingsDep,
    address: Annotated[str | None, Query(description="Wallet address; defaults to SOLANA_WALLET_ADDRESS")] = None,
):
    """
    Get total value and token positions for a wallet.

    Uses the configured default wallet when no `address` is given.
    """
    wallet_address = address or settings.SOLANA_WALLET_ADDRESS
    if not wallet_address:
        raise InvalidRequestError(
            "No wallet address provided",
            suggestion="Pass ?address=<wallet> or set SOLANA_WALLET_ADDRESS",
        )

    try:
        portfolio = service.get_portfolio(wallet_address)
    except ServiceError as e:
        logger.error(f"Portfolio API error from {e.service}: {e}")
        raise DelegateFailureError("Failed to fetch portfolio data")
    except Exception as e:
        logger.exception(f"Portfolio API error: {e}")
        raise DelegateFailureError("Failed to fetch portfolio data")

    return portfolio.to_json()


@router.post("/suggestions")
def portfolio_suggestions(request: SuggestionsRequest, assistant: AssistantDep):
    """
    Generate trading suggestions for a portfolio snapshot.

    Falls back to two fixed suggestions if the assistant is unavailable.
    """
    if request.portfolio is None:
        raise InvalidRequestError(
            "Portfolio data is required",
            suggestion="Send a JSON body like {\"portfolio\": {\"totalValue\": 0, \"tokens\": []}}",
        )

    try:
        return assistant.generate_portfolio_suggestions(request.portfolio)
    except Exception as e:
        source = e.service if isinstance(e, ServiceError) else type(e).__name__
        logger.error(f"Error generating portfolio suggestions ({source}), returning fallback: {e}")
        return fallback_suggestions()
