# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import datetime, timezone
from typing import Any


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now_iso() -> str:
    """
    Current UTC time as an ISO-8601 string with a trailing "Z".

    Example:
        utc_now_iso()  # "2026-10-16T09:30:00.123Z"
    """
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def to_float(value: Any, default: float = 0.0) -> float:
    """
    Parse a numeric value that upstream APIs send as strings.

    Returns `default` for None, empty strings and anything unparseable.
    """
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


# =============================================================================
# Delegate Errors
# =============================================================================

class ServiceError(Exception):
    """
    Base error for calls to an external service (OKX, OpenAI).

    Routes never forward these to clients as-is: they are logged and turned
    into a generic DelegateFailureError. The code and suggestion exist for the
    logs and for whoever is debugging the deployment.

    Attributes:
        service: Which upstream failed ("okx", "openai")
        code: Machine-readable failure code, e.g. "OKX_HTTP_ERROR"
        suggestion: What the operator should check
        details: Extra context such as endpoint or upstream status
    """

    service = "external"

    def __init__(
        self,
        message: str,
        code: str = "SERVICE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.suggestion:
            text += f" ({self.suggestion})"
        return text
