"""Tests for the get_repositories() and get_oracle() factories."""

from unittest.mock import AsyncMock, MagicMock

from price_oracle.domain.host import TrustedAuthorizer
from price_oracle.domain.services.oracle import PriceOracle
from price_oracle.infrastructure.persistence.repositories import (
    Repositories,
    SqlAssetRepository,
    SqlConfigRepository,
    SqlPriceRepository,
    get_oracle,
    get_repositories,
)


def _repos():
    return get_repositories(AsyncMock())


def test_get_repositories_returns_repositories_instance():
    assert isinstance(_repos(), Repositories)


def test_repositories_config_is_correct_type():
    assert isinstance(_repos().config, SqlConfigRepository)


def test_repositories_assets_is_correct_type():
    assert isinstance(_repos().assets, SqlAssetRepository)


def test_repositories_prices_is_correct_type():
    assert isinstance(_repos().prices, SqlPriceRepository)


def test_get_oracle_returns_price_oracle():
    assert isinstance(get_oracle(AsyncMock(), TrustedAuthorizer()), PriceOracle)


async def test_get_oracle_reads_through_session():
    session = AsyncMock()
    session.execute.return_value = MagicMock(scalar_one_or_none=MagicMock(return_value=None))
    oracle = get_oracle(session, TrustedAuthorizer())
    assert await oracle.admin() is None
    session.execute.assert_awaited()
