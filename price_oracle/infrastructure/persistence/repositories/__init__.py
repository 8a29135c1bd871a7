"""Concrete SQLAlchemy repository implementations.

Exports the SqlRepository classes plus the get_repositories() and
get_oracle() factories for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from price_oracle.domain.host import Authorizer, Deployer
from price_oracle.domain.services.oracle import PriceOracle

from .assets import SqlAssetRepository
from .config import SqlConfigRepository
from .prices import SqlPriceRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    config: SqlConfigRepository
    assets: SqlAssetRepository
    prices: SqlPriceRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session."""
    return Repositories(
        config=SqlConfigRepository(session),
        assets=SqlAssetRepository(session),
        prices=SqlPriceRepository(session),
    )


def get_oracle(
    session: AsyncSession,
    authorizer: Authorizer,
    deployer: Deployer | None = None,
) -> PriceOracle:
    """Build a PriceOracle whose every write lands in session's transaction.

        async for session in get_session():
            oracle = get_oracle(session, host_authorizer)
            await oracle.set_price(caller, prices, timestamp)
    """
    repos = get_repositories(session)
    return PriceOracle(
        config=repos.config,
        assets=repos.assets,
        prices=repos.prices,
        authorizer=authorizer,
        deployer=deployer,
    )


__all__ = [
    "SqlConfigRepository",
    "SqlAssetRepository",
    "SqlPriceRepository",
    "Repositories",
    "get_repositories",
    "get_oracle",
]
