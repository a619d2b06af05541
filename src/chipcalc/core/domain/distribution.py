"""
Distribution — Результаты расчёта раскладки и проверки номиналов

Frozen dataclasses, создаются заново на каждый вызов ядра и не
разделяются между вызовами.
"""

from dataclasses import dataclass, field
from typing import Any

from chipcalc.core.domain.denomination import Denomination


# =============================================================================
# ALLOCATION LINE
# =============================================================================


@dataclass(frozen=True)
class AllocationLine:
    """Строка раскладки: номинал и количество фишек на одного игрока."""

    denomination: Denomination
    quantity: int  # >= 0, на игрока
    subtotal: float  # quantity * value

    @property
    def color(self) -> str:
        return self.denomination.color

    @property
    def name(self) -> str:
        return self.denomination.name

    @property
    def value(self) -> float:
        return self.denomination.value

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.denomination.model_dump(),
            "quantity": self.quantity,
            "subtotal": self.subtotal,
        }


# =============================================================================
# RECOMMENDATION
# =============================================================================


@dataclass(frozen=True)
class Recommendation:
    """Справочные ориентиры для стека (не применяются принудительно)."""

    min_stack: float  # big_blind * 100
    ideal_chip_count: str  # литерал диапазона, например "20-30"


# =============================================================================
# DISTRIBUTION RESULT
# =============================================================================


@dataclass(frozen=True)
class DistributionResult:
    """Результат calculate_distribution.

    is_valid == abs(total_value - buy_in) < 0.01. Все проблемы входных
    данных описываются в warnings, исключения не используются.
    """

    distribution: tuple[AllocationLine, ...]
    total_value: float
    total_chips: int
    is_valid: bool
    warnings: tuple[str, ...]
    recommendation: Recommendation | None = None

    def quantity_of(self, color: str) -> int:
        """Количество фишек данного цвета на игрока (0, если цвета нет в раскладке)."""
        for line in self.distribution:
            if line.color == color:
                return line.quantity
        return 0

    def to_dict(self) -> dict[str, Any]:
        """Plain-data представление для UI-оболочки."""
        return {
            "distribution": [line.to_dict() for line in self.distribution],
            "total_value": self.total_value,
            "total_chips": self.total_chips,
            "is_valid": self.is_valid,
            "warnings": list(self.warnings),
            "recommendation": (
                {
                    "min_stack": self.recommendation.min_stack,
                    "ideal_chip_count": self.recommendation.ideal_chip_count,
                }
                if self.recommendation is not None
                else None
            ),
        }


# =============================================================================
# VALIDATION REPORT
# =============================================================================


@dataclass(frozen=True)
class ValidationReport:
    """Результат validate_chip_values."""

    is_optimal: bool
    suggestions: tuple[str, ...] = field(default_factory=tuple)
