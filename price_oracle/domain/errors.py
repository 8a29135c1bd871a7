"""Oracle error taxonomy.

Every failed call surfaces one of these.  Each carries a stable integer
code plus a reason string so callers can tell failures apart without
parsing messages.  "Not found" on the read path is never an error; reads
return None instead.
"""

from __future__ import annotations


class OracleError(Exception):
    """Base class for all oracle failures."""

    code: int = -1
    reason: str = "oracle error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = self.reason if detail is None else f"{self.reason}: {detail}"
        super().__init__(message)


class AlreadyInitialized(OracleError):
    code = 0
    reason = "oracle is already initialized"


class Unauthorized(OracleError):
    code = 1
    reason = "caller is not authorized"


class AssetAlreadyPresented(OracleError):
    code = 2
    reason = "asset is already registered"


class MissingRetentionPeriod(OracleError):
    """Fatal: a price write cannot compute entry lifetimes without a period."""

    code = 3
    reason = "retention period is not configured"


class AssetLimitExceeded(OracleError):
    code = 4
    reason = "asset registry is full"


class PriceBatchOverflow(OracleError):
    code = 5
    reason = "more prices than registered assets"


__all__ = [
    "OracleError",
    "AlreadyInitialized",
    "Unauthorized",
    "AssetAlreadyPresented",
    "MissingRetentionPeriod",
    "AssetLimitExceeded",
    "PriceBatchOverflow",
]
