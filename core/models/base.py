# =============================================================================
# core/models/base.py - Shared Model Configuration
# =============================================================================
# The HTTP contract uses camelCase keys (totalValue, riskLevel, change24h).
# Python code uses snake_case attributes; aliases bridge the two.
# =============================================================================

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model that reads and writes camelCase JSON.

    Accepts either spelling on input (populate_by_name), always emits
    camelCase from to_json().
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json(self) -> dict:
        """Dump to a JSON-safe dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
