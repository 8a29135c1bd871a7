"""Tests for SqlPriceRepository — expiry filtering and upsert statement shape."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.dialects import postgresql

from price_oracle.domain.models.market_data import U32_MAX, U64_MAX
from price_oracle.domain.services.lifetime import ledgers_to_live, ledgers_to_ms
from price_oracle.infrastructure.persistence.repositories.prices import SqlPriceRepository

NOW = 1_700_000_000_000


def _mock_session(scalar_result=None):
    session = AsyncMock()
    session.execute.return_value = MagicMock(
        scalar_one_or_none=MagicMock(return_value=scalar_result)
    )
    return session


def _compiled(session):
    stmt = session.execute.await_args.args[0]
    return stmt.compile(dialect=postgresql.dialect())


# --- get ---

async def test_get_returns_none_when_not_found():
    repo = SqlPriceRepository(_mock_session(None), clock=lambda: NOW)
    assert await repo.get(0, 900_000) is None


async def test_get_converts_numeric_to_int():
    big = 2**127 - 1
    repo = SqlPriceRepository(_mock_session(Decimal(big)), clock=lambda: NOW)
    result = await repo.get(0, 900_000)
    assert result == big and isinstance(result, int)


async def test_get_filters_out_expired_rows():
    session = _mock_session(None)
    await SqlPriceRepository(session, clock=lambda: NOW).get(1, 900_000)
    compiled = _compiled(session)
    assert "expires_at >" in str(compiled)
    assert NOW in compiled.params.values()


# --- set ---

async def test_set_issues_single_upsert():
    session = _mock_session()
    await SqlPriceRepository(session, clock=lambda: NOW).set(2, 150, 900_000, ledgers=3)
    assert session.execute.await_count == 1
    sql = str(_compiled(session))
    assert "ON CONFLICT (asset_index, bucket) DO UPDATE" in sql
    assert "greatest" in sql.lower()


async def test_set_computes_expiry_from_ledgers():
    session = _mock_session()
    await SqlPriceRepository(session, clock=lambda: NOW).set(2, 150, 900_000, ledgers=3)
    params = _compiled(session).params
    assert params["asset_index"] == 2
    assert params["bucket"] == 900_000
    assert params["price"] == 150
    assert params["expires_at"] == NOW + 15_000


# --- purge_expired ---

async def test_purge_expired_returns_rowcount():
    session = AsyncMock()
    session.execute.return_value = MagicMock(rowcount=3)
    assert await SqlPriceRepository(session, clock=lambda: NOW).purge_expired() == 3


async def test_set_with_maximum_lifetime_fits_bigint_column():
    session = _mock_session()
    ledgers = ledgers_to_live(U64_MAX)
    await SqlPriceRepository(session, clock=lambda: NOW).set(0, 1, 900_000, ledgers=ledgers)
    expires_at = _compiled(session).params["expires_at"]
    assert expires_at == NOW + ledgers_to_ms(U32_MAX)
    assert expires_at < 2**63
