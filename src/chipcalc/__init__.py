"""
chipcalc — poker chip distribution calculator.

Splits a buy-in into a per-player chip stack under inventory limits and
suggests chip denominations for a blind structure.
"""

from chipcalc.allocator import (
    AllocatorConfig,
    DistributionAllocator,
    apply_suggested_values,
    calculate_distribution,
    suggest_chip_values,
    validate_chip_values,
)
from chipcalc.core.domain import (
    AllocationLine,
    Denomination,
    DistributionResult,
    GameSettings,
    Recommendation,
    ValidationReport,
    default_chips,
)
from chipcalc.core.math import format_currency

__all__ = [
    "AllocatorConfig",
    "DistributionAllocator",
    "apply_suggested_values",
    "calculate_distribution",
    "suggest_chip_values",
    "validate_chip_values",
    "AllocationLine",
    "Denomination",
    "DistributionResult",
    "GameSettings",
    "Recommendation",
    "ValidationReport",
    "default_chips",
    "format_currency",
]
