"""Oracle configuration domain model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .assets import Asset
from .market_data import U32, U64


class OracleConfig(BaseModel):
    """One-time configuration supplied to `PriceOracle.config`.

    resolution is the bucket grid size in milliseconds and must be positive.
    period is the retention period in milliseconds; it drives how long each
    price entry is kept alive.  It is the only field that may change later.
    assets seeds the registry in index order.
    """

    model_config = ConfigDict(frozen=True)

    admin: str = Field(min_length=1)
    base_asset: Asset
    decimals: U32
    resolution: U32 = Field(gt=0)
    period: U64
    assets: list[Asset] = Field(default_factory=list)
