"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in price_oracle/infrastructure/ and are
wired at the application boundary.
"""

from .assets import AssetRepository
from .config import ConfigRepository
from .prices import PriceRepository

__all__ = [
    "AssetRepository",
    "ConfigRepository",
    "PriceRepository",
]
