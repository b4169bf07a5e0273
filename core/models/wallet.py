# =============================================================================
# core/models/wallet.py - Demo Wallet Schemas
# =============================================================================
# Static wallet shown to visitors who have not connected a wallet.
# Loaded once from core/data/demo_wallet.json and never mutated.
# =============================================================================

from pydantic import ConfigDict, Field

from core.models.base import CamelModel


class DemoToken(CamelModel):
    """One token holding in the demo wallet."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., examples=["SOL"])
    mint: str = Field(..., description="SPL mint address")
    amount: float = Field(..., ge=0)
    decimals: int = Field(..., ge=0, le=18)
    price: float = Field(..., ge=0)
    change24h: float | None = Field(
        default=None,
        alias="change24h",
        description="24h price change in percent",
    )

    @property
    def usd_value(self) -> float:
        return self.amount * self.price


class DemoWallet(CamelModel):
    """Pre-baked wallet: address, SOL balance and ordered token holdings."""

    model_config = ConfigDict(frozen=True)

    address: str
    balance: float = Field(..., ge=0)
    tokens: tuple[DemoToken, ...] = ()
