# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Two kinds of failure reach clients:
# - InvalidRequestError: the caller broke a precondition (HTTP 400)
# - DelegateFailureError: an upstream service call raised (HTTP 500)
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class TradePilotException(Exception):
    """
    Base exception for the TradePilot API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "TRADEPILOT_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "success": False,
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class InvalidRequestError(TradePilotException):
    """Raised when client-supplied input fails a precondition."""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            code="INVALID_REQUEST",
            status_code=400,
            suggestion=suggestion,
            details=details,
        )


# =============================================================================
# Upstream Errors
# =============================================================================

class DelegateFailureError(TradePilotException):
    """
    Raised when an external service call fails.

    The message stays generic. The underlying error is logged, and only
    returned when a route passes it as `detail`.
    """

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            message=message,
            code="DELEGATE_FAILURE",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
            details=detail,
        )


class PromptNotFoundError(TradePilotException):
    """Raised when a starter prompt id does not exist."""

    def __init__(self, prompt_id: str):
        super().__init__(
            message=f"Prompt not found: {prompt_id}",
            code="PROMPT_NOT_FOUND",
            status_code=404,
            suggestion="List available prompts with GET /api/chat/prompts",
            details={"promptId": prompt_id},
        )


class NoTrendingTokensError(TradePilotException):
    """Raised when trend aggregation returns nothing."""

    def __init__(self, chains: list[str]):
        super().__init__(
            message="No trending tokens found",
            code="NO_TRENDING_TOKENS",
            status_code=404,
            suggestion="Try again shortly or request a different set of chains",
            details={"chains": chains},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def tradepilot_exception_handler(
    request: Request,
    exc: TradePilotException
) -> JSONResponse:
    """
    Convert TradePilotException to JSON response.

    Returns structured error with:
    - error: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors (malformed JSON, wrong types).

    These are client errors, so they share the InvalidRequest shape and status.
    """
    errors = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=InvalidRequestError(
            "Invalid request body",
            details={"errors": errors},
        ).to_dict()
    )
