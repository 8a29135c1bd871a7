"""Reference layer ORM model: the registered asset list."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, SmallInteger, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from price_oracle.infrastructure.database import Base


class RegisteredAsset(Base):
    """One registry entry.

    asset_index is the dense 8-bit index assigned at registration; it is both
    the list position and the map value, so one table serves both lookups.
    asset_key is the canonical Asset.key; kind/code/issuer are kept alongside
    for readability in ad-hoc queries.
    """

    __tablename__ = "registered_assets"
    __table_args__ = (
        UniqueConstraint("asset_key", name="uq_registered_assets_asset_key"),
        CheckConstraint(
            "asset_index >= 0 AND asset_index <= 255", name="ck_registered_assets_index_u8"
        ),
    )

    asset_index: Mapped[int] = mapped_column(SmallInteger, primary_key=True, autoincrement=False)
    asset_key: Mapped[str] = mapped_column(Text, nullable=False)
    kind: Mapped[str] = mapped_column(Text, nullable=False)  # native / other
    code: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    issuer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    registered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
