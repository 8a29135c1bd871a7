"""Market data layer ORM model: price_entries."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import BigInteger, Index, Numeric, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from price_oracle.infrastructure.database import Base


class PriceEntry(Base):
    """One price for one asset index at one time bucket.

    Composite PK: (asset_index, bucket).
    price is a signed 128-bit integer, hence NUMERIC(39, 0); bucket is an
    unsigned 64-bit epoch-ms value, hence NUMERIC(20, 0).
    expires_at (epoch ms) replaces host-managed entry expiry: rows at or
    past it read as absent.  There is no FK to registered_assets; the write
    path maps batch positions to indices directly.
    """

    __tablename__ = "price_entries"
    __table_args__ = (Index("ix_price_entries_expires_at", "expires_at"),)

    asset_index: Mapped[int] = mapped_column(SmallInteger, primary_key=True, autoincrement=False)
    bucket: Mapped[Decimal] = mapped_column(Numeric(20, 0), primary_key=True)
    price: Mapped[Decimal] = mapped_column(Numeric(39, 0), nullable=False)
    expires_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
