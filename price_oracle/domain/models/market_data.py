"""Price observation domain models.

PriceData   — one stored observation for one asset at one time bucket.
PriceUpdate — a validated batch write; prices[i] belongs to asset index i.

Prices are signed 128-bit fixed-point magnitudes scaled by the oracle's
configured decimals; timestamps are unsigned 64-bit epoch milliseconds.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

I128_MIN = -(2**127)
I128_MAX = 2**127 - 1
U64_MAX = 2**64 - 1
U32_MAX = 2**32 - 1

I128 = Annotated[int, Field(ge=I128_MIN, le=I128_MAX)]
U64 = Annotated[int, Field(ge=0, le=U64_MAX)]
U32 = Annotated[int, Field(ge=0, le=U32_MAX)]


class PriceData(BaseModel):
    """A price observation as returned by the read path."""

    model_config = ConfigDict(frozen=True)

    price: I128
    timestamp: U64


class PriceUpdate(BaseModel):
    """One batch of prices pushed by the admin, all at the same timestamp.

    The timestamp is written verbatim as the bucket key; callers that want
    point-in-time reads to hit it must pass a grid-aligned value.
    """

    model_config = ConfigDict(frozen=True)

    prices: list[I128]
    timestamp: U64
