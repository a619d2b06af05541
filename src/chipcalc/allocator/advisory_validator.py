"""
Advisory Validator — рекомендации по набору номиналов

Независим от аллокатора (не вызывает его). Проверки:
- младший номинал не больше малого блайнда
- есть номинал не больше 2 * small_blind (для ставок блайндов)
- соседние номиналы отличаются не более чем в 10 раз
"""

import math
from collections.abc import Sequence
from typing import Final

from chipcalc.core.domain.denomination import Denomination
from chipcalc.core.domain.distribution import ValidationReport
from chipcalc.core.math.currency import format_plain_number
from chipcalc.core.math.numerical_safeguards import safe_divide

EMPTY_INVENTORY_SUGGESTION = "Add at least one chip type"

# Максимальное отношение соседних номиналов без "дыры"
MAX_ADJACENT_RATIO: Final[float] = 10.0


def validate_chip_values(
    small_blind: float, buy_in: float, chips: Sequence[Denomination]
) -> ValidationReport:
    """
    Проверка набора номиналов для заданных блайндов.

    Args:
        small_blind: Малый блайнд
        buy_in: Buy-in на игрока (в текущих проверках не участвует)
        chips: Инвентарь фишек (не изменяется)

    Returns:
        ValidationReport; is_optimal == (нет рекомендаций)
    """
    if not chips:
        return ValidationReport(is_optimal=False, suggestions=(EMPTY_INVENTORY_SUGGESTION,))

    ordered = sorted(chips, key=lambda chip: chip.value)
    suggestions = []

    smallest_value = ordered[0].value
    if smallest_value > small_blind:
        suggestions.append(
            f"Smallest chip (${format_plain_number(smallest_value)}) "
            f"is larger than small blind (${format_plain_number(small_blind)})"
        )

    if not any(chip.value <= small_blind * 2 for chip in ordered):
        suggestions.append(
            f"Consider a chip worth ${format_plain_number(small_blind)} "
            f"or ${format_plain_number(small_blind * 2)} for blind bets"
        )

    for lower, upper in zip(ordered, ordered[1:]):
        # Бесплатная фишка рядом с платной считается "дырой"
        ratio = safe_divide(
            upper.value, lower.value, fallback=math.inf if upper.value > 0 else 0.0
        )
        if ratio > MAX_ADJACENT_RATIO:
            suggestions.append(f"Large gap between {lower.name} and {upper.name} chips")

    return ValidationReport(is_optimal=not suggestions, suggestions=tuple(suggestions))
