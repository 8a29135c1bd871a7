"""SQLAlchemy implementation of PriceRepository."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from price_oracle.domain.repositories.prices import PriceRepository
from price_oracle.domain.services.lifetime import current_time_ms, ledgers_to_ms
from price_oracle.infrastructure.persistence.models.market_data import PriceEntry


class SqlPriceRepository(PriceRepository):
    def __init__(
        self,
        session: AsyncSession,
        clock: Callable[[], int] = current_time_ms,
    ) -> None:
        self._session = session
        self._clock = clock

    async def get(self, index: int, timestamp: int) -> int | None:
        stmt = select(PriceEntry.price).where(
            PriceEntry.asset_index == index,
            PriceEntry.bucket == timestamp,
            PriceEntry.expires_at > self._clock(),
        )
        result = await self._session.execute(stmt)
        price = result.scalar_one_or_none()
        return int(price) if price is not None else None

    async def set(self, index: int, price: int, timestamp: int, ledgers: int) -> None:
        expires_at = self._clock() + ledgers_to_ms(ledgers)
        stmt = pg_insert(PriceEntry).values(
            asset_index=index,
            bucket=timestamp,
            price=price,
            expires_at=expires_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["asset_index", "bucket"],
            set_={
                "price": stmt.excluded.price,
                "expires_at": func.greatest(PriceEntry.expires_at, stmt.excluded.expires_at),
            },
        )
        await self._session.execute(stmt)

    async def purge_expired(self) -> int:
        stmt = delete(PriceEntry).where(PriceEntry.expires_at <= self._clock())
        result = await self._session.execute(stmt)
        return result.rowcount
