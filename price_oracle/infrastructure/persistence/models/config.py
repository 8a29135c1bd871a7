"""Oracle state ORM model: the singleton oracle_state row."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import BigInteger, CheckConstraint, Numeric, SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from price_oracle.infrastructure.database import Base

STATE_ROW_ID = 1


class OracleState(Base):
    """Global oracle configuration plus the last-write watermark.

    At most one row (id = 1) exists; its presence is the "initialized" flag.
    base_asset holds the canonical asset key.  Unsigned 64-bit values are
    stored as NUMERIC(20, 0) since BIGINT is signed.
    expires_at is the epoch-ms lifetime of the oracle's own state, extended
    by bump.  It is advisory metadata for the host's retention tooling:
    config reads do not filter on it, unlike price_entry.expires_at.
    """

    __tablename__ = "oracle_state"
    __table_args__ = (CheckConstraint("id = 1", name="ck_oracle_state_singleton"),)

    id: Mapped[int] = mapped_column(SmallInteger, primary_key=True, default=STATE_ROW_ID)
    admin: Mapped[str] = mapped_column(Text, nullable=False)
    base_asset: Mapped[str] = mapped_column(Text, nullable=False)
    decimals: Mapped[int] = mapped_column(BigInteger, nullable=False)
    resolution: Mapped[int] = mapped_column(BigInteger, nullable=False)  # ms
    retention_period: Mapped[Optional[Decimal]] = mapped_column(Numeric(20, 0), nullable=True)  # ms
    last_timestamp: Mapped[Decimal] = mapped_column(Numeric(20, 0), nullable=False, default=0)
    expires_at: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)
