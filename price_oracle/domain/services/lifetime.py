"""Storage-lifetime arithmetic.

Entry lifetimes are counted in ledgers, the host's persistence unit.  A
ledger closes roughly every LEDGER_INTERVAL_MS, so a wall-clock retention
period converts to a ledger count with a one-ledger safety margin.  The
relational store turns ledgers back into an explicit expiry timestamp.

Ledger counts are unsigned 32-bit, so the longest lifetime is
MAX_LEDGERS * LEDGER_INTERVAL_MS (about 680 years) and now + that always
fits a signed 64-bit millisecond column.
"""

from __future__ import annotations

from datetime import datetime, timezone

from price_oracle.domain.models.market_data import U32_MAX

LEDGER_INTERVAL_MS = 5_000
MAX_LEDGERS = U32_MAX


def ledgers_to_live(retention_period: int) -> int:
    """Ledgers an entry must survive to outlive retention_period milliseconds.

    Saturates at MAX_LEDGERS for retention periods beyond the u32 range.
    """
    return min(retention_period // 1000 // 5 + 1, MAX_LEDGERS)


def ledgers_to_ms(ledgers: int) -> int:
    return ledgers * LEDGER_INTERVAL_MS


def current_time_ms() -> int:
    """Wall-clock time in epoch milliseconds (UTC)."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)
