"""Asset registry service.

Assigns each registered asset a dense, stable 8-bit index equal to its
position in the registry at insertion time.  Registration is append-only
and all-or-nothing per batch: the whole batch is validated against the
existing registry (and against itself) before anything is persisted.
"""

from __future__ import annotations

import logging

from price_oracle.domain.errors import AssetAlreadyPresented, AssetLimitExceeded
from price_oracle.domain.models.assets import MAX_ASSETS, Asset
from price_oracle.domain.repositories.assets import AssetRepository

logger = logging.getLogger(__name__)


class AssetRegistry:
    """Duplicate-checked front end over an AssetRepository."""

    def __init__(self, repository: AssetRepository) -> None:
        self._repository = repository

    async def register(self, assets: list[Asset]) -> list[int]:
        """Register assets in order and return their assigned indices.

        Raises:
            AssetAlreadyPresented: If any asset is already registered or
                appears twice in the batch.  Nothing is registered.
            AssetLimitExceeded: If the batch would push the registry past
                MAX_ASSETS entries.  Nothing is registered.
        """
        await self.validate(assets)
        if not assets:
            return []
        indices = await self._repository.append(list(assets))
        logger.info(
            "Registered %d asset(s) at indices %d..%d",
            len(indices),
            indices[0],
            indices[-1],
        )
        return indices

    async def validate(self, assets: list[Asset]) -> None:
        """Run register()'s checks without persisting anything."""
        presented = await self._repository.list()
        seen = {asset.key for asset in presented}
        for asset in assets:
            if asset.key in seen:
                raise AssetAlreadyPresented(asset.key)
            seen.add(asset.key)
        if len(seen) > MAX_ASSETS:
            raise AssetLimitExceeded(f"{len(seen)} > {MAX_ASSETS}")

    async def index_of(self, asset: Asset) -> int | None:
        return await self._repository.index_of(asset)

    async def list(self) -> list[Asset]:
        return await self._repository.list()

    async def count(self) -> int:
        return len(await self._repository.list())
