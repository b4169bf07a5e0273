# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - chat.py: Trading assistant chat + starter prompts
# - portfolio.py: Wallet portfolio and AI suggestions
# - trending.py: Multi-chain trending tokens
# - demo.py: Static demo wallet
# - device.py: Device capability classification
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import chat
from . import portfolio
from . import trending
from . import demo
from . import device

__all__ = [
    "health",
    "chat",
    "portfolio",
    "trending",
    "demo",
    "device",
]
