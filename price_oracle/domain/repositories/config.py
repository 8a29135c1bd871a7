"""Config repository interface.

ConfigRepository holds the oracle's one-time global parameters plus the
last-write watermark.  It is a singleton store, not a collection, so it does
not follow a CRUD shape.  Every getter returns None before initialization;
the watermark reads as 0.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from price_oracle.domain.models.assets import Asset
from price_oracle.domain.models.config import OracleConfig


class ConfigRepository(ABC):
    """Read/write interface for oracle-wide settings."""

    @abstractmethod
    async def is_initialized(self) -> bool:
        """Return True once initialize() has run."""

    @abstractmethod
    async def initialize(self, config: OracleConfig) -> None:
        """Store admin, base asset, decimals, resolution and period together.

        The initial asset list is not stored here; it goes through the asset
        registry.  Callers check is_initialized() first.
        """

    @abstractmethod
    async def get_admin(self) -> str | None:
        """Return the admin principal, or None."""

    @abstractmethod
    async def get_base_asset(self) -> Asset | None:
        """Return the quote asset every price is expressed in, or None."""

    @abstractmethod
    async def get_decimals(self) -> int | None:
        """Return the fixed-point precision of stored prices, or None."""

    @abstractmethod
    async def get_resolution(self) -> int | None:
        """Return the bucket grid size in milliseconds, or None."""

    @abstractmethod
    async def get_retention_period(self) -> int | None:
        """Return the retention period in milliseconds, or None."""

    @abstractmethod
    async def set_retention_period(self, period: int) -> None:
        """Overwrite the retention period."""

    @abstractmethod
    async def get_last_timestamp(self) -> int:
        """Return the last-write watermark; 0 when nothing has been written."""

    @abstractmethod
    async def set_last_timestamp(self, timestamp: int) -> None:
        """Overwrite the watermark.  Monotonicity is the caller's concern."""

    @abstractmethod
    async def extend_ttl(self, ledgers: int) -> int | None:
        """Keep the oracle's own state alive for at least `ledgers` more ledgers.

        Returns the resulting expiry in epoch milliseconds, or None when there
        is no state to extend yet.

        The expiry is advisory: it is recorded for the host, and the config
        getters keep answering after it passes.
        """
