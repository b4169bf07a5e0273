# =============================================================================
# app/routers/trending.py - Multi-chain Trending Endpoints
# =============================================================================
# GET  /api/trending/multi-chain?chains=1,56,501&limit=10
# POST /api/trending/multi-chain {chains, limit, options}
#
# Validation order:
# 1. limit must be an integer in [1, 50]
# 2. every chain must be one of SUPPORTED_CHAINS
#
# The aggregator always analyzes the full basket for the requested chains;
# the limit only truncates its ranked output. Successful responses carry a
# public Cache-Control header.
# =============================================================================

import logging
import re
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.dependencies import SettingsDep, TrendingServiceDep
from app.config import Settings
from app.exceptions import DelegateFailureError, InvalidRequestError, NoTrendingTokensError
from core.models.base import CamelModel
from core.models.trending import (
    DEFAULT_CHAINS,
    DEFAULT_TRENDING_LIMIT,
    MAX_TRENDING_LIMIT,
    MIN_TRENDING_LIMIT,
    SUPPORTED_CHAINS,
)
from core.services.trending_service import TrendingService
from lib.utils import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()


class TrendingRequest(BaseModel):
    """
    Body of POST /api/trending/multi-chain.

    Fields are loosely typed so that bad values produce the route's own
    400 messages.
    """
    chains: Any = Field(default_factory=lambda: list(DEFAULT_CHAINS), examples=[["1", "501"]])
    limit: Any = Field(default=DEFAULT_TRENDING_LIMIT, examples=[10])
    options: Any = Field(default_factory=dict, description="Echoed back in metadata")


# =============================================================================
# Validation
# =============================================================================

LIMIT_ERROR = f"Limit must be between {MIN_TRENDING_LIMIT} and {MAX_TRENDING_LIMIT}"

INTEGER_PATTERN = re.compile(r"-?\d+")


def parse_limit(value: Any) -> int:
    """
    Coerce a limit from a query string or JSON body.

    Accepts ints and integer strings; everything else (floats, bools,
    garbage, out-of-range numbers) raises InvalidRequestError.
    """
    if isinstance(value, bool):
        raise InvalidRequestError(LIMIT_ERROR)

    if isinstance(value, int):
        limit = value
    elif isinstance(value, str) and INTEGER_PATTERN.fullmatch(value.strip()):
        limit = int(value.strip())
    else:
        raise InvalidRequestError(LIMIT_ERROR, details={"limit": str(value)})

    if not MIN_TRENDING_LIMIT <= limit <= MAX_TRENDING_LIMIT:
        raise InvalidRequestError(LIMIT_ERROR, details={"limit": str(limit)})

    return limit


def parse_chains_param(chains_param: str | None) -> list[str]:
    """Split a comma-separated chains query value; missing or empty means all chains."""
    if not chains_param:
        return list(DEFAULT_CHAINS)
    return [c.strip() for c in chains_param.split(",") if c.strip()]


def validate_chains(chains: Any) -> list[str]:
    """
    Check the chain list against the whitelist.

    Raises:
        InvalidRequestError: If chains is not a non-empty list, or names any
            unsupported chain (all offenders are listed)
    """
    if not isinstance(chains, list) or not chains:
        raise InvalidRequestError("chains array is required with at least one chain")

    invalid = [str(chain) for chain in chains if not isinstance(chain, str) or chain not in SUPPORTED_CHAINS]
    if invalid:
        supported = ", ".join(SUPPORTED_CHAINS)
        raise InvalidRequestError(
            f"Invalid chain indices: {', '.join(invalid)}. Supported chains: {supported}",
            details={"invalidChains": invalid},
        )

    return chains


# =============================================================================
# Shared Handler
# =============================================================================

def _trending_response(
    service: TrendingService,
    settings: Settings,
    chains: list[str],
    limit: int,
    options: Any = None,
    include_options: bool = False,
) -> JSONResponse:
    try:
        result = service.analyze_trending_tokens_multi_chain(chains)
    except Exception as e:
        logger.exception(f"Multi-chain trending API error: {e}")
        raise DelegateFailureError(
            "Failed to fetch multi-chain trending tokens",
            detail=str(e) or "Unknown error",
        )

    if not result:
        raise NoTrendingTokensError(chains)

    limited = result[:limit]

    metadata: dict[str, Any] = {
        "totalTokens": len(limited),
        "totalFound": len(result),
        "chainsAnalyzed": chains,
        "limit": limit,
    }
    if include_options:
        metadata["options"] = options
    metadata["timestamp"] = utc_now_iso()

    return JSONResponse(
        content={
            "success": True,
            "data": [t.to_json() if isinstance(t, CamelModel) else t for t in limited],
            "metadata": metadata,
        },
        headers={"Cache-Control": settings.trending_cache_control},
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/multi-chain")
def get_multi_chain_trending(
    service: TrendingServiceDep,
    settings: SettingsDep,
    chains: str | None = None,
    limit: str | None = None,
):
    """
    Ranked trending tokens across chains.

    - chains: comma-separated chain ids from {1, 56, 501} (default: all)
    - limit: 1-50 (default: 10)

    Empty `chains=` or `limit=` values count as absent.
    """
    chain_list = parse_chains_param(chains)
    parsed_limit = parse_limit(limit) if limit else DEFAULT_TRENDING_LIMIT
    validate_chains(chain_list)

    logger.info(
        f"Processing multi-chain trending request for chains: {', '.join(chain_list)}, limit: {parsed_limit}"
    )
    return _trending_response(service, settings, chain_list, parsed_limit)


@router.post("/multi-chain")
def post_multi_chain_trending(
    request: TrendingRequest,
    service: TrendingServiceDep,
    settings: SettingsDep,
):
    """
    Same as GET, with a JSON body. `options` is echoed in the metadata.
    """
    if not isinstance(request.chains, list) or not request.chains:
        raise InvalidRequestError("chains array is required with at least one chain")

    parsed_limit = parse_limit(request.limit)
    chain_list = validate_chains(request.chains)

    logger.info(
        f"Processing multi-chain trending POST request for chains: {', '.join(chain_list)}, limit: {parsed_limit}"
    )
    return _trending_response(
        service,
        settings,
        chain_list,
        parsed_limit,
        options=request.options,
        include_options=True,
    )
