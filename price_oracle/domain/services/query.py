"""Read path: resolve asset + timestamp into a stored observation.

Reads never mutate state and never raise for missing data.  An unknown
asset, an unconfigured oracle, and an absent or expired bucket all yield
None.
"""

from __future__ import annotations

from price_oracle.domain.models.assets import Asset
from price_oracle.domain.models.market_data import PriceData
from price_oracle.domain.repositories.config import ConfigRepository
from price_oracle.domain.repositories.prices import PriceRepository
from price_oracle.domain.services.registry import AssetRegistry
from price_oracle.domain.services.timestamps import normalize_timestamp


class QueryEngine:
    def __init__(
        self,
        registry: AssetRegistry,
        config: ConfigRepository,
        prices: PriceRepository,
    ) -> None:
        self._registry = registry
        self._config = config
        self._prices = prices

    async def price(self, asset: Asset, timestamp: int) -> PriceData | None:
        """Return the observation in the grid bucket containing timestamp."""
        index = await self._registry.index_of(asset)
        if index is None:
            return None
        resolution = await self._config.get_resolution()
        if resolution is None:
            return None
        bucket = normalize_timestamp(timestamp, resolution)
        return await self._by_index(index, bucket)

    async def lastprice(self, asset: Asset) -> PriceData | None:
        """Return the observation written by the most recent batch.

        The watermark is already an exact bucket key, so it is not normalized.
        """
        index = await self._registry.index_of(asset)
        if index is None:
            return None
        timestamp = await self._config.get_last_timestamp()
        return await self._by_index(index, timestamp)

    async def _by_index(self, index: int, timestamp: int) -> PriceData | None:
        price = await self._prices.get(index, timestamp)
        if price is None:
            return None
        return PriceData(price=price, timestamp=timestamp)
