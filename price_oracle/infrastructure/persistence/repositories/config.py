"""SQLAlchemy implementation of ConfigRepository."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from price_oracle.domain.models.assets import Asset
from price_oracle.domain.models.config import OracleConfig
from price_oracle.domain.repositories.config import ConfigRepository
from price_oracle.domain.services.lifetime import current_time_ms, ledgers_to_ms
from price_oracle.infrastructure.persistence.models.config import STATE_ROW_ID, OracleState


class SqlConfigRepository(ConfigRepository):
    def __init__(
        self,
        session: AsyncSession,
        clock: Callable[[], int] = current_time_ms,
    ) -> None:
        self._session = session
        self._clock = clock

    async def _row(self) -> OracleState | None:
        stmt = select(OracleState).where(OracleState.id == STATE_ROW_ID)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _require_row(self) -> OracleState:
        row = await self._row()
        if row is None:
            raise ValueError("Oracle state not found; initialize first")
        return row

    async def is_initialized(self) -> bool:
        return await self._row() is not None

    async def initialize(self, config: OracleConfig) -> None:
        row = OracleState(
            id=STATE_ROW_ID,
            admin=config.admin,
            base_asset=config.base_asset.key,
            decimals=config.decimals,
            resolution=config.resolution,
            retention_period=config.period,
            last_timestamp=0,
            expires_at=None,
        )
        self._session.add(row)

    async def get_admin(self) -> str | None:
        row = await self._row()
        return row.admin if row else None

    async def get_base_asset(self) -> Asset | None:
        row = await self._row()
        return Asset.from_key(row.base_asset) if row else None

    async def get_decimals(self) -> int | None:
        row = await self._row()
        return row.decimals if row else None

    async def get_resolution(self) -> int | None:
        row = await self._row()
        return row.resolution if row else None

    async def get_retention_period(self) -> int | None:
        row = await self._row()
        if row is None or row.retention_period is None:
            return None
        return int(row.retention_period)

    async def set_retention_period(self, period: int) -> None:
        row = await self._require_row()
        row.retention_period = period

    async def get_last_timestamp(self) -> int:
        row = await self._row()
        return int(row.last_timestamp) if row else 0

    async def set_last_timestamp(self, timestamp: int) -> None:
        row = await self._require_row()
        row.last_timestamp = timestamp

    async def extend_ttl(self, ledgers: int) -> int | None:
        row = await self._row()
        if row is None:
            return None
        expires_at = self._clock() + ledgers_to_ms(ledgers)
        if row.expires_at is None or row.expires_at < expires_at:
            row.expires_at = expires_at
        return row.expires_at
