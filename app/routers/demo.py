# =============================================================================
# app/routers/demo.py - Demo Wallet Endpoint
# =============================================================================
# Serves the static demo wallet for visitors without a connected wallet.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import DemoWalletServiceDep

router = APIRouter()


@router.get("/wallet")
async def get_demo_wallet(service: DemoWalletServiceDep):
    """Return the bundled demo wallet, identical on every call."""
    return service.generate_demo_wallet().to_json()
