"""Tests for SqlConfigRepository — mapping and session interaction."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from price_oracle.domain.models.assets import Asset
from price_oracle.domain.models.config import OracleConfig
from price_oracle.infrastructure.persistence.models.config import OracleState
from price_oracle.infrastructure.persistence.repositories.config import SqlConfigRepository

NOW = 1_700_000_000_000


def _state_row(**overrides):
    defaults = {
        "id": 1,
        "admin": "GADMIN",
        "base_asset": "native",
        "decimals": 14,
        "resolution": 300_000,
        "retention_period": Decimal(86_400_000),
        "last_timestamp": Decimal(0),
        "expires_at": None,
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def _mock_session(scalar_result=None):
    session = AsyncMock()
    session.add = MagicMock()
    session.execute.return_value = MagicMock(
        scalar_one_or_none=MagicMock(return_value=scalar_result)
    )
    return session


def _repo(row=None):
    return SqlConfigRepository(_mock_session(scalar_result=row), clock=lambda: NOW)


# --- reads ---

async def test_is_initialized_false_without_row():
    assert await _repo().is_initialized() is False


async def test_is_initialized_true_with_row():
    assert await _repo(_state_row()).is_initialized() is True


async def test_getters_return_none_without_row():
    repo = _repo()
    assert await repo.get_admin() is None
    assert await repo.get_base_asset() is None
    assert await repo.get_decimals() is None
    assert await repo.get_resolution() is None
    assert await repo.get_retention_period() is None


async def test_last_timestamp_zero_without_row():
    assert await _repo().get_last_timestamp() == 0


async def test_base_asset_maps_key_to_domain():
    row = _state_row(base_asset="other:USDC:GCIRCLE")
    assert await _repo(row).get_base_asset() == Asset.other("USDC", "GCIRCLE")


async def test_retention_period_converts_numeric_to_int():
    result = await _repo(_state_row(retention_period=Decimal(3_600_000))).get_retention_period()
    assert result == 3_600_000 and isinstance(result, int)


async def test_last_timestamp_converts_numeric_to_int():
    result = await _repo(_state_row(last_timestamp=Decimal(18_446_744_073_709_551_615))).get_last_timestamp()
    assert result == 2**64 - 1


# --- writes ---

async def test_initialize_adds_singleton_row():
    session = _mock_session()
    config = OracleConfig(
        admin="GADMIN",
        base_asset=Asset.native(),
        decimals=14,
        resolution=300_000,
        period=86_400_000,
    )
    await SqlConfigRepository(session).initialize(config)
    row = session.add.call_args.args[0]
    assert isinstance(row, OracleState)
    assert (row.id, row.admin, row.base_asset) == (1, "GADMIN", "native")
    assert (row.resolution, row.retention_period, row.last_timestamp) == (300_000, 86_400_000, 0)


async def test_set_retention_period_updates_row():
    row = _state_row()
    await _repo(row).set_retention_period(1_000)
    assert row.retention_period == 1_000


async def test_set_retention_period_raises_without_row():
    with pytest.raises(ValueError):
        await _repo().set_retention_period(1_000)


async def test_set_last_timestamp_updates_row():
    row = _state_row()
    await _repo(row).set_last_timestamp(900_000)
    assert row.last_timestamp == 900_000


# --- extend_ttl ---

async def test_extend_ttl_without_row_returns_none():
    assert await _repo().extend_ttl(10) is None


async def test_extend_ttl_sets_expiry_from_clock():
    row = _state_row()
    assert await _repo(row).extend_ttl(2) == NOW + 10_000
    assert row.expires_at == NOW + 10_000


async def test_extend_ttl_never_shortens():
    row = _state_row(expires_at=NOW + 1_000_000)
    assert await _repo(row).extend_ttl(1) == NOW + 1_000_000
