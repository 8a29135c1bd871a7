"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports all repository implementations and the factories.
"""

from price_oracle.infrastructure.persistence.models import *  # noqa: F401, F403
from price_oracle.infrastructure.persistence.models import __all__ as _orm_all
from price_oracle.infrastructure.persistence.repositories import (
    Repositories,
    SqlAssetRepository,
    SqlConfigRepository,
    SqlPriceRepository,
    get_oracle,
    get_repositories,
)

__all__ = _orm_all + [
    "Repositories",
    "SqlConfigRepository",
    "SqlAssetRepository",
    "SqlPriceRepository",
    "get_repositories",
    "get_oracle",
]
