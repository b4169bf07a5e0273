# =============================================================================
# lib/okx_client.py - OKX Web3 DEX API Client
# =============================================================================
# Thin typed wrapper around the OKX Web3 DEX REST API (/api/v5/dex/...).
#
# - Market endpoints (candles) are public
# - Balance endpoints need signed requests: HMAC-SHA256 over
#   timestamp + method + requestPath + body, base64 encoded, sent in the
#   OK-ACCESS-* headers
#
# Every response is an envelope {"code": "0", "msg": "", "data": [...]}.
# Anything other than HTTP 2xx with code "0" raises OKXAPIError.
#
# Usage:
#   from lib.okx_client import get_okx_client
#   candles = get_okx_client().get_candlesticks("501", sol_mint)
# =============================================================================

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from core.models.trending import Candle
from lib.utils import ServiceError, utc_now_iso

# Set up logging for this module
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v5/dex"

# Endpoint path fragments that require OK-ACCESS-* signing
SIGNED_ENDPOINT_MARKERS = ("balance", "wallet", "account")

USER_AGENT = "TradePilot-API/1.0"


class OKXAPIError(ServiceError):
    """Error talking to the OKX API (transport, HTTP status or envelope code)."""

    service = "okx"

    def __init__(
        self,
        message: str,
        code: str = "OKX_API_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


def sign_request(
    secret_key: str,
    timestamp: str,
    method: str,
    request_path: str,
    body: str = "",
) -> str:
    """
    Build the OK-ACCESS-SIGN value.

    Args:
        secret_key: OKX secret key
        timestamp: ISO-8601 timestamp, identical to OK-ACCESS-TIMESTAMP
        method: "GET" or "POST"
        request_path: Path including the query string
        body: Raw JSON body for POST requests

    Returns:
        Base64-encoded HMAC-SHA256 digest
    """
    message = f"{timestamp}{method.upper()}{request_path}{body}"
    digest = hmac.new(
        secret_key.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


class OKXClient:
    """
    Synchronous client for the OKX Web3 DEX API.

    Example:
        client = OKXClient(api_key="...", secret_key="...", passphrase="...")
        balances = client.get_all_token_balances(wallet, ["501"])
    """

    def __init__(
        self,
        api_key: str = "",
        secret_key: str = "",
        passphrase: str = "",
        base_url: str = "https://web3.okx.com",
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = api_key
        self.secret_key = secret_key
        self.passphrase = passphrase
        self._http = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json", "User-Agent": USER_AGENT},
        )

    @classmethod
    def from_settings(cls) -> OKXClient:
        from app.config import settings

        return cls(
            api_key=settings.OKX_API_KEY,
            secret_key=settings.OKX_SECRET_KEY,
            passphrase=settings.OKX_API_PASSPHRASE,
            base_url=settings.OKX_BASE_URL,
            timeout=settings.OKX_TIMEOUT_SECONDS,
        )

    def close(self) -> None:
        self._http.close()

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _auth_headers(self, method: str, request_path: str, body: str = "") -> dict[str, str]:
        if not (self.api_key and self.secret_key and self.passphrase):
            raise OKXAPIError(
                message="OKX credentials are not configured",
                code="OKX_NOT_CONFIGURED",
                suggestion="Set OKX_API_KEY, OKX_SECRET_KEY and OKX_API_PASSPHRASE in your .env file",
            )

        timestamp = utc_now_iso()
        return {
            "OK-ACCESS-KEY": self.api_key,
            "OK-ACCESS-SIGN": sign_request(self.secret_key, timestamp, method, request_path, body),
            "OK-ACCESS-TIMESTAMP": timestamp,
            "OK-ACCESS-PASSPHRASE": self.passphrase,
        }

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> list[Any]:
        """
        GET /api/v5/dex/{endpoint} and return the envelope's `data` list.

        Raises:
            OKXAPIError: On transport failure, non-2xx status or non-zero code
        """
        clean_params = {k: v for k, v in (params or {}).items() if v is not None and v != ""}
        query = urlencode(clean_params)
        request_path = f"{API_PREFIX}/{endpoint}" + (f"?{query}" if query else "")

        headers = {}
        if any(marker in endpoint for marker in SIGNED_ENDPOINT_MARKERS):
            headers = self._auth_headers("GET", request_path)

        logger.debug(f"OKX GET {request_path}")

        try:
            response = self._http.get(request_path, headers=headers)
        except httpx.HTTPError as e:
            raise OKXAPIError(
                message=f"Request to OKX failed: {e}",
                code="OKX_TRANSPORT_ERROR",
                suggestion="Check network connectivity to the OKX API",
                details={"endpoint": endpoint},
            ) from e

        if response.is_error:
            raise OKXAPIError(
                message=f"OKX API responded with status: {response.status_code}",
                code="OKX_HTTP_ERROR",
                details={"endpoint": endpoint, "status": response.status_code, "body": response.text[:200]},
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise OKXAPIError(
                message="OKX API returned a non-JSON body",
                code="OKX_BAD_RESPONSE",
                details={"endpoint": endpoint},
            ) from e

        if str(payload.get("code")) != "0":
            raise OKXAPIError(
                message=f"OKX API error {payload.get('code')}: {payload.get('msg', '')}",
                code="OKX_API_ERROR",
                details={"endpoint": endpoint, "okx_code": payload.get("code")},
            )

        return payload.get("data") or []

    # -------------------------------------------------------------------------
    # Market Data
    # -------------------------------------------------------------------------

    def get_candlesticks(
        self,
        chain_index: str,
        token_contract_address: str,
        bar: str = "1H",
        limit: int = 24,
    ) -> list[Candle]:
        """
        Fetch OHLCV bars for a token, newest first.

        Args:
            chain_index: OKX chain index ("1", "56", "501")
            token_contract_address: Token contract or mint address
            bar: Bar size ("1m", "1H", "1D", ...)
            limit: Number of bars

        Returns:
            List of Candle, index 0 is the most recent bar
        """
        rows = self.get(
            "market/candles",
            {
                "chainIndex": chain_index,
                "tokenContractAddress": token_contract_address,
                "bar": bar,
                "limit": limit,
            },
        )
        return [Candle.from_row(row) for row in rows]

    # -------------------------------------------------------------------------
    # Balances
    # -------------------------------------------------------------------------

    def get_total_value(self, address: str, chains: str | None = None) -> float:
        """Total USD value held by `address` (optionally restricted to chains)."""
        data = self.get("balance/total-value", {"address": address, "chains": chains})
        if not data:
            return 0.0
        try:
            return float(data[0].get("totalValue") or 0)
        except (TypeError, ValueError):
            return 0.0

    def get_all_token_balances(self, address: str, chains: list[str]) -> list[dict[str, Any]]:
        """
        All token balances for `address` on the given chains.

        Returns:
            List of tokenAssets dicts with keys such as symbol,
            tokenContractAddress, balance, tokenPrice, isRiskToken
        """
        data = self.get(
            "balance/all-token-balances-by-address",
            {"address": address, "chains": ",".join(chains)},
        )
        if not data:
            return []
        return data[0].get("tokenAssets") or []


# Lazy-loaded shared client
_client: OKXClient | None = None


def get_okx_client() -> OKXClient:
    """Get or create the shared OKX client (lazy initialization)."""
    global _client
    if _client is None:
        _client = OKXClient.from_settings()
        logger.info("OKX client initialized")
    return _client


def close_okx_client() -> None:
    """Close the shared client; the next get_okx_client() call opens a new one."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("OKX client closed")
