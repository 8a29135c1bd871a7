"""Asset registry repository interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from price_oracle.domain.models.assets import Asset


class AssetRepository(ABC):
    """Append-only storage for the ordered asset list and its index map.

    The list and the map are kept strictly consistent: every listed asset has
    exactly one index, equal to its position in list().
    """

    @abstractmethod
    async def list(self) -> list[Asset]:
        """Return all registered assets in index order."""

    @abstractmethod
    async def index_of(self, asset: Asset) -> int | None:
        """Return the asset's index, or None if it was never registered."""

    @abstractmethod
    async def append(self, assets: list[Asset]) -> list[int]:
        """Append assets in order and return their newly assigned indices.

        No duplicate checking happens here; AssetRegistry validates first.
        """
