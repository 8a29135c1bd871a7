"""Price oracle service: the public operation surface.

Composes the config store, asset registry, price store and query engine
behind the operations a host exposes to callers:

  - config          one-time initialization
  - add_assets      admin-gated registry append
  - set_period      admin-gated retention period overwrite
  - set_price       admin-gated batch write + watermark advance
  - bump            extend the lifetime of the oracle's own state
  - update_contract admin-gated code upgrade (delegated to the host)
  - purge_expired   drop price entries whose lifetime has lapsed
  - price / lastprice and the config readers

Every mutating operation checks all of its preconditions before the first
write, so a failure never leaves a partial mutation behind even without
the host's transaction rollback.
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from price_oracle import __version__
from price_oracle.domain.errors import (
    AlreadyInitialized,
    MissingRetentionPeriod,
    PriceBatchOverflow,
    Unauthorized,
)
from price_oracle.domain.host import Authorizer, Deployer
from price_oracle.domain.models.assets import Asset
from price_oracle.domain.models.config import OracleConfig
from price_oracle.domain.models.market_data import U32, U64, PriceData, PriceUpdate
from price_oracle.domain.repositories.assets import AssetRepository
from price_oracle.domain.repositories.config import ConfigRepository
from price_oracle.domain.repositories.prices import PriceRepository
from price_oracle.domain.services.lifetime import ledgers_to_live
from price_oracle.domain.services.query import QueryEngine
from price_oracle.domain.services.registry import AssetRegistry

logger = logging.getLogger(__name__)

_CODE_HASH_LEN = 32
_U32 = TypeAdapter(U32)
_U64 = TypeAdapter(U64)


class PriceOracle:
    """Single-writer, many-reader price store.

    The host serializes calls, so no method needs locking.  Callers are
    principal strings; the Authorizer decides whether the current call is
    really signed by that principal.
    """

    def __init__(
        self,
        config: ConfigRepository,
        assets: AssetRepository,
        prices: PriceRepository,
        authorizer: Authorizer,
        deployer: Deployer | None = None,
    ) -> None:
        self._config = config
        self._prices = prices
        self._registry = AssetRegistry(assets)
        self._query = QueryEngine(self._registry, config, prices)
        self._authorizer = authorizer
        self._deployer = deployer

    # ------------------------------------------------------------------ #
    # Reads                                                                #
    # ------------------------------------------------------------------ #

    async def base(self) -> Asset | None:
        return await self._config.get_base_asset()

    async def decimals(self) -> int | None:
        return await self._config.get_decimals()

    async def resolution(self) -> int | None:
        """Bucket grid size in seconds (stored internally in milliseconds)."""
        resolution = await self._config.get_resolution()
        if resolution is None:
            return None
        return resolution // 1000

    async def period(self) -> int | None:
        return await self._config.get_retention_period()

    async def assets(self) -> list[Asset]:
        return await self._registry.list()

    async def last_timestamp(self) -> int:
        return await self._config.get_last_timestamp()

    async def admin(self) -> str | None:
        return await self._config.get_admin()

    async def price(self, asset: Asset, timestamp: int) -> PriceData | None:
        return await self._query.price(asset, _U64.validate_python(timestamp))

    async def lastprice(self, asset: Asset) -> PriceData | None:
        return await self._query.lastprice(asset)

    def version(self) -> int:
        """Major version of the running oracle code."""
        return int(__version__.split(".")[0])

    # ------------------------------------------------------------------ #
    # Admin section                                                        #
    # ------------------------------------------------------------------ #

    async def config(self, caller: str, config: OracleConfig) -> None:
        """Initialize the oracle and seed the asset registry.

        Raises:
            Unauthorized: If the host cannot verify caller.
            AlreadyInitialized: If config has already run.
            AssetAlreadyPresented: If config.assets contains a duplicate.
        """
        await self._authorizer.require_auth(caller)
        if await self._config.is_initialized():
            raise AlreadyInitialized()
        await self._registry.validate(config.assets)

        await self._config.initialize(config)
        await self._registry.register(config.assets)
        logger.info(
            "Oracle initialized: admin=%s base=%s decimals=%d resolution=%dms "
            "period=%dms assets=%d",
            config.admin,
            config.base_asset.key,
            config.decimals,
            config.resolution,
            config.period,
            len(config.assets),
        )

    async def add_assets(self, caller: str, assets: list[Asset]) -> list[int]:
        """Append assets to the registry and return their indices."""
        await self._require_admin(caller)
        return await self._registry.register(assets)

    async def set_period(self, caller: str, period: int) -> None:
        await self._require_admin(caller)
        period = _U64.validate_python(period)
        await self._config.set_retention_period(period)
        logger.info("Retention period set to %dms", period)

    async def set_price(self, caller: str, prices: list[int], timestamp: int) -> None:
        """Write one price per asset index at timestamp and advance the watermark.

        prices[i] is stored for asset index i.  timestamp is used verbatim as
        the bucket key; it is not normalized.

        Raises:
            Unauthorized: If caller is not the admin.
            MissingRetentionPeriod: If no retention period was ever set.
            PriceBatchOverflow: If there are more prices than registered assets.
        """
        await self._require_admin(caller)
        update = PriceUpdate(prices=prices, timestamp=timestamp)

        retention_period = await self._config.get_retention_period()
        if retention_period is None:
            raise MissingRetentionPeriod()
        registered = await self._registry.count()
        if len(update.prices) > registered:
            raise PriceBatchOverflow(f"{len(update.prices)} prices, {registered} assets")

        ledgers = ledgers_to_live(retention_period)
        last_timestamp = await self._config.get_last_timestamp()

        for index, price in enumerate(update.prices):
            await self._prices.set(index, price, update.timestamp, ledgers)
        if update.timestamp > last_timestamp:
            await self._config.set_last_timestamp(update.timestamp)
        logger.debug(
            "Stored %d price(s) at %d (ttl=%d ledgers)",
            len(update.prices),
            update.timestamp,
            ledgers,
        )

    async def bump(self, ledgers: int) -> int | None:
        """Extend the lifetime of the oracle's own state.  Not admin-gated."""
        expires_at = await self._config.extend_ttl(_U32.validate_python(ledgers))
        if expires_at is None:
            logger.debug("bump(%d) before initialization; nothing to extend", ledgers)
        return expires_at

    async def purge_expired(self) -> int:
        """Delete lapsed price entries and return how many were removed.

        Not admin-gated: expired entries already read as absent, so removing
        them never changes what price or lastprice return.
        """
        removed = await self._prices.purge_expired()
        if removed:
            logger.info("Purged %d expired price entries", removed)
        return removed

    async def update_contract(self, caller: str, code_hash: bytes) -> None:
        """Hand a new code build to the host's upgrade mechanism."""
        await self._require_admin(caller)
        if len(code_hash) != _CODE_HASH_LEN:
            raise ValueError(
                f"code_hash must be {_CODE_HASH_LEN} bytes, got {len(code_hash)}"
            )
        if self._deployer is None:
            raise NotImplementedError("No deployer configured for code upgrades")
        await self._deployer.update_current_code(code_hash)
        logger.info("Code upgrade requested: %s", code_hash.hex())

    async def _require_admin(self, caller: str) -> None:
        admin = await self._config.get_admin()
        if admin is None or caller != admin:
            logger.warning("Rejected admin call from %s", caller)
            raise Unauthorized(caller)
        await self._authorizer.require_auth(caller)
