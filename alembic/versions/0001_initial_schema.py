"""Initial schema — oracle_state, registered_assets, price_entries.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "oracle_state",
        sa.Column("id", sa.SmallInteger, primary_key=True),
        sa.Column("admin", sa.Text, nullable=False),
        sa.Column("base_asset", sa.Text, nullable=False),
        sa.Column("decimals", sa.BigInteger, nullable=False),
        sa.Column("resolution", sa.BigInteger, nullable=False),
        sa.Column("retention_period", sa.Numeric(20, 0), nullable=True),
        sa.Column("last_timestamp", sa.Numeric(20, 0), nullable=False),
        sa.Column("expires_at", sa.BigInteger, nullable=True),
        sa.CheckConstraint("id = 1", name="ck_oracle_state_singleton"),
    )

    op.create_table(
        "registered_assets",
        sa.Column("asset_index", sa.SmallInteger, primary_key=True, autoincrement=False),
        sa.Column("asset_key", sa.Text, nullable=False),
        sa.Column("kind", sa.Text, nullable=False),
        sa.Column("code", sa.Text, nullable=True),
        sa.Column("issuer", sa.Text, nullable=True),
        sa.Column(
            "registered_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.UniqueConstraint("asset_key", name="uq_registered_assets_asset_key"),
        sa.CheckConstraint(
            "asset_index >= 0 AND asset_index <= 255", name="ck_registered_assets_index_u8"
        ),
    )

    op.create_table(
        "price_entries",
        sa.Column("asset_index", sa.SmallInteger, primary_key=True, autoincrement=False),
        sa.Column("bucket", sa.Numeric(20, 0), primary_key=True),
        sa.Column("price", sa.Numeric(39, 0), nullable=False),
        sa.Column("expires_at", sa.BigInteger, nullable=False),
    )
    op.create_index("ix_price_entries_expires_at", "price_entries", ["expires_at"])


def downgrade() -> None:
    op.drop_index("ix_price_entries_expires_at", table_name="price_entries")
    op.drop_table("price_entries")
    op.drop_table("registered_assets")
    op.drop_table("oracle_state")
