"""ORM model registry — imports every model module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from price_oracle.infrastructure.persistence.models.config import STATE_ROW_ID, OracleState
from price_oracle.infrastructure.persistence.models.reference import RegisteredAsset
from price_oracle.infrastructure.persistence.models.market_data import PriceEntry

__all__ = [
    # State
    "OracleState",
    "STATE_ROW_ID",
    # Reference
    "RegisteredAsset",
    # Market data
    "PriceEntry",
]
