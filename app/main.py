# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the TradePilot API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main            (uses API_HOST / API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    TradePilotException,
    tradepilot_exception_handler,
    validation_exception_handler,
)
from app.routers import health, chat, portfolio, trending, demo, device
from lib.okx_client import close_okx_client

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: log configuration
    - Shutdown: close the shared OKX HTTP client if one was opened
    """
    logger.info(f"Starting TradePilot API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if not settings.ai_configured:
        logger.warning("OPENAI_API_KEY is not set; chat will fail and suggestions will use fallbacks")
    if not settings.okx_configured:
        logger.warning("OKX credentials are not set; portfolio lookups will fail")

    yield

    logger.info("Shutting down TradePilot API")

    close_okx_client()


# Create FastAPI application
app = FastAPI(
    title="TradePilot API",
    description="""
## Crypto Trading Assistant API

TradePilot proxies an AI trading assistant and OKX Web3 DEX market data
behind a small JSON API.

### Endpoints

| Route | Purpose |
|-------|---------|
| `POST /api/chat` | Ask the trading assistant a question |
| `GET /api/portfolio` | Wallet value and positions |
| `POST /api/portfolio/suggestions` | AI suggestions for a portfolio |
| `GET/POST /api/trending/multi-chain` | Trending tokens on Ethereum, BSC and Solana |
| `GET /api/demo/wallet` | Static demo wallet |
| `GET /api/device/capabilities` | Device tier for render caps |

### Quick Start

```bash
curl -X POST http://localhost:8000/api/chat \\
  -H "Content-Type: application/json" \\
  -d '{"message": "Should I take profit on BONK?"}'

curl "http://localhost:8000/api/trending/multi-chain?chains=1,501&limit=5"
```
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Chat",
            "description": "Trading assistant conversation",
        },
        {
            "name": "Portfolio",
            "description": "Wallet portfolio and AI suggestions",
        },
        {
            "name": "Trending",
            "description": "Multi-chain trending token analysis",
        },
        {
            "name": "Demo",
            "description": "Static demo data",
        },
        {
            "name": "Device",
            "description": "Client device capability hints",
        },
        {
            "name": "Health",
            "description": "API health checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(TradePilotException)
async def handle_tradepilot_exception(request: Request, exc: TradePilotException):
    """Handle custom TradePilot exceptions."""
    return await tradepilot_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Malformed bodies and query params are client errors (400)."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Trading assistant chat
app.include_router(
    chat.router,
    prefix="/api/chat",
    tags=["Chat"]
)

# Portfolio + suggestions
app.include_router(
    portfolio.router,
    prefix="/api/portfolio",
    tags=["Portfolio"]
)

# Trending tokens
app.include_router(
    trending.router,
    prefix="/api/trending",
    tags=["Trending"]
)

# Demo wallet
app.include_router(
    demo.router,
    prefix="/api/demo",
    tags=["Demo"]
)

# Device capabilities
app.include_router(
    device.router,
    prefix="/api/device",
    tags=["Device"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "TradePilot API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
