"""Time bucketing onto the oracle's resolution grid."""

from __future__ import annotations


def normalize_timestamp(timestamp: int, resolution: int) -> int:
    """Return the greatest multiple of resolution that is <= timestamp.

    Guarantees 0 <= timestamp - result < resolution.

    Raises:
        ValueError: If resolution is not positive.
    """
    if resolution <= 0:
        raise ValueError(f"resolution must be positive, got {resolution}")
    return timestamp - timestamp % resolution
