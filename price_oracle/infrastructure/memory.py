"""In-memory oracle store.

Notes
-----
* All oracle state lives in one MemoryState object that the three
  repositories share by reference, so an oracle built on it behaves like
  the SQL-backed one without a database.
* Calls are serialized by the caller (one operation at a time), and the
  service validates before it writes, so no locking is needed.
* There is no transaction rollback here; all-or-nothing relies on the
  service checking every precondition first.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from price_oracle.domain.host import Authorizer, Deployer
from price_oracle.domain.models.assets import Asset
from price_oracle.domain.models.config import OracleConfig
from price_oracle.domain.repositories.assets import AssetRepository
from price_oracle.domain.repositories.config import ConfigRepository
from price_oracle.domain.repositories.prices import PriceRepository
from price_oracle.domain.services.lifetime import current_time_ms, ledgers_to_ms
from price_oracle.domain.services.oracle import PriceOracle


@dataclass
class MemoryState:
    """Every piece of persisted oracle state."""

    config: OracleConfig | None = None
    retention_period: int | None = None
    last_timestamp: int = 0
    # advisory, set by bump; config reads ignore it
    expires_at: int | None = None
    # asset list + key -> index map, kept strictly consistent
    assets: list[Asset] = field(default_factory=list)
    asset_indexes: dict[str, int] = field(default_factory=dict)
    # (asset index, bucket) -> (price, expires_at)
    prices: dict[tuple[int, int], tuple[int, int]] = field(default_factory=dict)


class MemoryConfigRepository(ConfigRepository):
    def __init__(self, state: MemoryState, clock: Callable[[], int] = current_time_ms) -> None:
        self._state = state
        self._clock = clock

    def _require_config(self) -> OracleConfig:
        if self._state.config is None:
            raise ValueError("Oracle state not found; initialize first")
        return self._state.config

    async def is_initialized(self) -> bool:
        return self._state.config is not None

    async def initialize(self, config: OracleConfig) -> None:
        self._state.config = config
        self._state.retention_period = config.period

    async def get_admin(self) -> str | None:
        return self._state.config.admin if self._state.config else None

    async def get_base_asset(self) -> Asset | None:
        return self._state.config.base_asset if self._state.config else None

    async def get_decimals(self) -> int | None:
        return self._state.config.decimals if self._state.config else None

    async def get_resolution(self) -> int | None:
        return self._state.config.resolution if self._state.config else None

    async def get_retention_period(self) -> int | None:
        return self._state.retention_period

    async def set_retention_period(self, period: int) -> None:
        self._require_config()
        self._state.retention_period = period

    async def get_last_timestamp(self) -> int:
        return self._state.last_timestamp

    async def set_last_timestamp(self, timestamp: int) -> None:
        self._require_config()
        self._state.last_timestamp = timestamp

    async def extend_ttl(self, ledgers: int) -> int | None:
        if self._state.config is None:
            return None
        expires_at = self._clock() + ledgers_to_ms(ledgers)
        if self._state.expires_at is None or self._state.expires_at < expires_at:
            self._state.expires_at = expires_at
        return self._state.expires_at


class MemoryAssetRepository(AssetRepository):
    def __init__(self, state: MemoryState) -> None:
        self._state = state

    async def list(self) -> list[Asset]:
        return list(self._state.assets)

    async def index_of(self, asset: Asset) -> int | None:
        return self._state.asset_indexes.get(asset.key)

    async def append(self, assets: list[Asset]) -> list[int]:
        indices: list[int] = []
        for asset in assets:
            index = len(self._state.assets)
            self._state.assets.append(asset)
            self._state.asset_indexes[asset.key] = index
            indices.append(index)
        return indices


class MemoryPriceRepository(PriceRepository):
    def __init__(self, state: MemoryState, clock: Callable[[], int] = current_time_ms) -> None:
        self._state = state
        self._clock = clock

    async def get(self, index: int, timestamp: int) -> int | None:
        entry = self._state.prices.get((index, timestamp))
        if entry is None:
            return None
        price, expires_at = entry
        if expires_at <= self._clock():
            return None
        return price

    async def set(self, index: int, price: int, timestamp: int, ledgers: int) -> None:
        expires_at = self._clock() + ledgers_to_ms(ledgers)
        existing = self._state.prices.get((index, timestamp))
        if existing is not None:
            expires_at = max(expires_at, existing[1])
        self._state.prices[(index, timestamp)] = (price, expires_at)

    async def purge_expired(self) -> int:
        now = self._clock()
        expired = [key for key, (_, expires_at) in self._state.prices.items() if expires_at <= now]
        for key in expired:
            del self._state.prices[key]
        return len(expired)


def create_memory_oracle(
    authorizer: Authorizer,
    deployer: Deployer | None = None,
    state: MemoryState | None = None,
    clock: Callable[[], int] = current_time_ms,
) -> PriceOracle:
    """Build a PriceOracle over a (new or existing) MemoryState."""
    state = state if state is not None else MemoryState()
    return PriceOracle(
        config=MemoryConfigRepository(state, clock),
        assets=MemoryAssetRepository(state),
        prices=MemoryPriceRepository(state, clock),
        authorizer=authorizer,
        deployer=deployer,
    )
