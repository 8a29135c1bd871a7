"""Price repository interface.

PriceRepository stores one price per (asset index, time bucket).  It never
normalizes timestamps; callers pass the bucket key they want.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class PriceRepository(ABC):
    """Read/write interface for per-bucket price entries."""

    @abstractmethod
    async def get(self, index: int, timestamp: int) -> int | None:
        """Return the price stored at (index, timestamp).

        Expired and never-written entries both return None.
        """

    @abstractmethod
    async def set(self, index: int, price: int, timestamp: int, ledgers: int) -> None:
        """Upsert the price at (index, timestamp) and extend its lifetime.

        ledgers is the number of lifetime units the entry must survive from
        now; an existing longer lifetime is never shortened.
        """

    @abstractmethod
    async def purge_expired(self) -> int:
        """Physically delete entries whose lifetime has lapsed; return how many."""
