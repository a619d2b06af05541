"""
Denomination Pool — канонические номиналы фишек

Process-wide immutable константы, используемые подбором номиналов
и пирамидальной раскладкой.
"""

from typing import Final

# Канонический пул номиналов (по возрастанию)
DENOMINATION_POOL: Final[tuple[float, ...]] = (
    0.25,
    0.50,
    1,
    2,
    5,
    10,
    20,
    25,
    50,
    100,
    250,
    500,
    1000,
    2500,
    5000,
)

# Fallback для целочисленных блайндов, если пул отфильтрован в пустоту
FALLBACK_INTEGER_DENOMINATIONS: Final[tuple[float, ...]] = (1, 5, 10, 25, 100)

# Целевые количества фишек на игрока для пирамиды (от младшего номинала к старшему)
PYRAMID_TARGETS: Final[tuple[int, ...]] = (25, 15, 10, 6, 4, 3, 2, 2, 2, 2)


def pool_between(
    lower: float,
    upper: float,
    *,
    lower_inclusive: bool = True,
    integers_only: bool = False,
) -> list[float]:
    """
    Номиналы пула в диапазоне [lower, upper] (или (lower, upper]), по возрастанию.

    Args:
        lower: Нижняя граница
        upper: Верхняя граница (включительно)
        lower_inclusive: Включать ли lower в диапазон
        integers_only: Оставить только целые номиналы

    Returns:
        Отфильтрованные номиналы в порядке пула
    """
    result = []
    for value in DENOMINATION_POOL:
        above = value >= lower if lower_inclusive else value > lower
        if not above or value > upper:
            continue
        if integers_only and value % 1 != 0:
            continue
        result.append(value)
    return result


def pyramid_targets(count: int, targets: tuple[int, ...] = PYRAMID_TARGETS) -> list[int]:
    """
    Целевые количества для count номиналов.

    Последовательность обрезается до count или дополняется её последним
    значением.

    Examples:
        >>> pyramid_targets(3)
        [25, 15, 10]
        >>> pyramid_targets(12)[-3:]
        [2, 2, 2]
    """
    if count <= len(targets):
        return list(targets[:count])
    return list(targets) + [targets[-1]] * (count - len(targets))
