"""Domain model package.

All domain objects are frozen Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .assets import MAX_ASSETS, Asset
from .config import OracleConfig
from .enums import AssetKind
from .market_data import I128_MAX, I128_MIN, U32_MAX, U64_MAX, PriceData, PriceUpdate

__all__ = [
    # enums
    "AssetKind",
    # assets
    "Asset",
    "MAX_ASSETS",
    # config
    "OracleConfig",
    # market data
    "PriceData",
    "PriceUpdate",
    "I128_MIN",
    "I128_MAX",
    "U64_MAX",
    "U32_MAX",
]
