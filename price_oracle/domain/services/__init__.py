"""Domain services package."""

from .lifetime import (
    LEDGER_INTERVAL_MS,
    MAX_LEDGERS,
    current_time_ms,
    ledgers_to_live,
    ledgers_to_ms,
)
from .oracle import PriceOracle
from .query import QueryEngine
from .registry import AssetRegistry
from .timestamps import normalize_timestamp

__all__ = [
    "AssetRegistry",
    "LEDGER_INTERVAL_MS",
    "MAX_LEDGERS",
    "PriceOracle",
    "QueryEngine",
    "current_time_ms",
    "ledgers_to_live",
    "ledgers_to_ms",
    "normalize_timestamp",
]
