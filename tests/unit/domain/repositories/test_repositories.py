"""Tests for price_oracle/domain/repositories — abstract interfaces."""

import asyncio

import pytest

from price_oracle.domain.repositories import AssetRepository, ConfigRepository, PriceRepository


def test_config_repository_is_abstract():
    with pytest.raises(TypeError):
        ConfigRepository()  # type: ignore[abstract]


def test_asset_repository_is_abstract():
    with pytest.raises(TypeError):
        AssetRepository()  # type: ignore[abstract]


def test_price_repository_is_abstract():
    with pytest.raises(TypeError):
        PriceRepository()  # type: ignore[abstract]


def test_price_repository_partial_subclass_cannot_instantiate():
    class _Partial(PriceRepository):
        async def get(self, index, timestamp): return None
        # missing set, purge_expired

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_asset_repository_concrete_subclass_instantiates():
    class _Impl(AssetRepository):
        async def list(self): return []
        async def index_of(self, asset): return None
        async def append(self, assets): return list(range(len(assets)))

    assert asyncio.run(_Impl().append(["a", "b"])) == [0, 1]
