"""SQLAlchemy implementation of AssetRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from price_oracle.domain.models.assets import Asset
from price_oracle.domain.models.enums import AssetKind
from price_oracle.domain.repositories.assets import AssetRepository
from price_oracle.infrastructure.persistence.models.reference import RegisteredAsset


class SqlAssetRepository(AssetRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @staticmethod
    def _to_domain(row: RegisteredAsset) -> Asset:
        return Asset(kind=AssetKind(row.kind), code=row.code, issuer=row.issuer)

    async def list(self) -> list[Asset]:
        stmt = select(RegisteredAsset).order_by(RegisteredAsset.asset_index.asc())
        result = await self._session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars()]

    async def index_of(self, asset: Asset) -> int | None:
        stmt = select(RegisteredAsset.asset_index).where(RegisteredAsset.asset_key == asset.key)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def append(self, assets: list[Asset]) -> list[int]:
        stmt = select(func.count()).select_from(RegisteredAsset)
        result = await self._session.execute(stmt)
        next_index = result.scalar_one()
        indices: list[int] = []
        for offset, asset in enumerate(assets):
            index = next_index + offset
            self._session.add(
                RegisteredAsset(
                    asset_index=index,
                    asset_key=asset.key,
                    kind=asset.kind.value,
                    code=asset.code,
                    issuer=asset.issuer,
                )
            )
            indices.append(index)
        return indices
