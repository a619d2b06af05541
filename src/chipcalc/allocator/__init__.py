"""Allocator — подбор номиналов и раскладка фишек под buy-in.

Композиция:
    settings + inventory → suggest_chip_values (опционально)
                         → calculate_distribution
    validate_chip_values — независимая диагностика набора номиналов

Все точки входа — чистые функции без побочных эффектов.
"""

from .advisory_validator import validate_chip_values
from .denomination_pool import (
    DENOMINATION_POOL,
    FALLBACK_INTEGER_DENOMINATIONS,
    PYRAMID_TARGETS,
)
from .distribution_allocator import (
    AllocatorConfig,
    DistributionAllocator,
    calculate_distribution,
)
from .value_suggester import (
    apply_suggested_values,
    suggest_blinds,
    suggest_buy_in,
    suggest_chip_values,
)

__all__ = [
    "DENOMINATION_POOL",
    "FALLBACK_INTEGER_DENOMINATIONS",
    "PYRAMID_TARGETS",
    "suggest_chip_values",
    "apply_suggested_values",
    "suggest_buy_in",
    "suggest_blinds",
    "AllocatorConfig",
    "DistributionAllocator",
    "calculate_distribution",
    "validate_chip_values",
]
