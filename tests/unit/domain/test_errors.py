"""Tests for price_oracle/domain/errors.py."""

import pytest

from price_oracle.domain.errors import (
    AlreadyInitialized,
    AssetAlreadyPresented,
    AssetLimitExceeded,
    MissingRetentionPeriod,
    OracleError,
    PriceBatchOverflow,
    Unauthorized,
)

ALL_ERRORS = [
    AlreadyInitialized,
    Unauthorized,
    AssetAlreadyPresented,
    MissingRetentionPeriod,
    AssetLimitExceeded,
    PriceBatchOverflow,
]


@pytest.mark.parametrize("error_cls", ALL_ERRORS)
def test_every_error_is_an_oracle_error(error_cls):
    assert issubclass(error_cls, OracleError)


def test_error_codes_are_distinct():
    codes = [cls.code for cls in ALL_ERRORS]
    assert len(set(codes)) == len(codes)


def test_already_initialized_code():
    assert AlreadyInitialized.code == 0


def test_message_defaults_to_reason():
    assert str(Unauthorized()) == "caller is not authorized"


def test_message_includes_detail():
    err = AssetAlreadyPresented("other:USDC:GA5Z")
    assert str(err) == "asset is already registered: other:USDC:GA5Z"
    assert err.detail == "other:USDC:GA5Z"
