"""
Value Suggester — подбор номиналов фишек по блайндам и buy-in

Предлагает num_chip_types номиналов, покрывающих диапазон от блайндов
до половины buy-in.

Два режима:
- Fractional blinds (small_blind < 1 или big_blind < 1): первые два номинала
  строго равны SB и BB, остальные — из пула выше BB и не выше max(buy_in/2, 1)
- Integer blinds: равномерная выборка целых номиналов пула в диапазоне
  [min(SB, 1), max(buy_in/2, 2*SB)]

Результат всегда строго возрастающий и без дубликатов; может быть короче
запрошенного (функция никогда не дополняет и не бросает исключений).
"""

import logging
from collections.abc import Sequence

from chipcalc.allocator.denomination_pool import (
    FALLBACK_INTEGER_DENOMINATIONS,
    pool_between,
)
from chipcalc.core.domain.denomination import Denomination
from chipcalc.core.math.numerical_safeguards import round_half_up

logger = logging.getLogger(__name__)


# =============================================================================
# ПОДБОР НОМИНАЛОВ
# =============================================================================


def suggest_chip_values(small_blind: float, buy_in: float, num_chip_types: int) -> list[float]:
    """
    Подбор номиналов фишек.

    Args:
        small_blind: Малый блайнд (big_blind считается как 2 * small_blind)
        buy_in: Buy-in на игрока
        num_chip_types: Сколько цветов фишек есть у хоста

    Returns:
        Номиналы по возрастанию, без дубликатов, не длиннее num_chip_types
    """
    if num_chip_types <= 0:
        return []

    big_blind = small_blind * 2
    is_fractional = small_blind < 1 or big_blind < 1

    if is_fractional:
        values = _fractional_values(small_blind, big_blind, buy_in, num_chip_types)
    else:
        values = _integer_values(small_blind, buy_in, num_chip_types)

    logger.debug(
        "suggest_chip_values: mode=%s sb=%s buy_in=%s types=%d -> %s",
        "fractional" if is_fractional else "integer",
        small_blind,
        buy_in,
        num_chip_types,
        values,
    )
    return sorted({float(v) for v in values})


def _fractional_values(
    small_blind: float, big_blind: float, buy_in: float, num_chip_types: int
) -> list[float]:
    """SB и BB как есть, затем номиналы пула выше BB."""
    values = [small_blind]
    if num_chip_types >= 2:
        values.append(big_blind)

    max_value = max(buy_in / 2, 1)
    remaining = pool_between(big_blind, max_value, lower_inclusive=False)
    values.extend(remaining[: max(num_chip_types - 2, 0)])
    return values


def _integer_values(small_blind: float, buy_in: float, num_chip_types: int) -> list[float]:
    """Равномерная выборка целых номиналов пула."""
    min_value = min(small_blind, 1)
    max_value = max(buy_in / 2, small_blind * 2)

    candidates = pool_between(min_value, max_value, integers_only=True)
    if not candidates:
        candidates = list(FALLBACK_INTEGER_DENOMINATIONS)

    if len(candidates) <= num_chip_types:
        return candidates

    # Один цвет: шаг не определён, берём младший номинал
    if num_chip_types == 1:
        return [candidates[0]]

    step = (len(candidates) - 1) / (num_chip_types - 1)
    return [candidates[round_half_up(i * step)] for i in range(num_chip_types)]


# =============================================================================
# ПРИМЕНЕНИЕ К ИНВЕНТАРЮ
# =============================================================================


def apply_suggested_values(
    chips: Sequence[Denomination], small_blind: float, buy_in: float
) -> list[Denomination]:
    """
    Переоценка инвентаря предложенными номиналами.

    i-й по стоимости цвет получает i-й предложенный номинал; цвета сверх
    длины предложения сохраняют свою стоимость. Входной инвентарь не
    изменяется.

    Args:
        chips: Инвентарь фишек
        small_blind: Малый блайнд
        buy_in: Buy-in на игрока

    Returns:
        Новый список номиналов, отсортированный по новой стоимости
    """
    if not chips:
        return []

    suggested = suggest_chip_values(small_blind, buy_in, len(chips))
    ordered = sorted(chips, key=lambda chip: chip.value)

    revalued = [
        chip.with_value(suggested[index]) if index < len(suggested) else chip
        for index, chip in enumerate(ordered)
    ]
    return sorted(revalued, key=lambda chip: chip.value)


# =============================================================================
# ПРАВИЛО 100 BIG BLINDS
# =============================================================================


def suggest_buy_in(big_blind: float) -> float:
    """Рекомендуемый buy-in: 100 big blinds."""
    return big_blind * 100


def suggest_blinds(buy_in: float) -> tuple[float, float]:
    """
    Блайнды под buy-in по правилу 100 big blinds.

    Returns:
        (small_blind, big_blind), где big_blind = buy_in / 100
    """
    big_blind = buy_in / 100
    return big_blind / 2, big_blind
