"""
Domain models and value objects.

Contains the chip inventory entity (Denomination), game settings and the
result records produced by the allocator and the advisory validator.
"""

from chipcalc.core.domain.denomination import Denomination, default_chips
from chipcalc.core.domain.distribution import (
    AllocationLine,
    DistributionResult,
    Recommendation,
    ValidationReport,
)
from chipcalc.core.domain.game_settings import GameSettings

__all__ = [
    # Inventory
    "Denomination",
    "default_chips",
    # Settings
    "GameSettings",
    # Results
    "AllocationLine",
    "DistributionResult",
    "Recommendation",
    "ValidationReport",
]
