"""
Distribution Allocator — раскладка фишек на одного игрока

Подбирает, сколько фишек каждого номинала выдать игроку, чтобы сумма
совпала с buy-in, с учётом инвентаря (cap = floor(quantity / num_players)
на номинал) и "удобной" формы стека: много мелких фишек, мало крупных.

Стратегия зависит от количества номиналов:
- 1 номинал: round(buy_in / value), ограничено cap
- 2 номинала: ~15 мелких (не больше половины buy-in), остаток крупными,
  хвост добирается мелкими
- 3+ номинала: пирамида (25, 15, 10, 6, 4, 3, 2, ...) с подрезкой сверху,
  добором мелкими и минимумом 2 фишки на каждый цвет

Функция никогда не бросает исключений: некорректные входы и недостижимое
точное совпадение отражаются в is_valid и warnings.

Эвристика, а не точный решатель: оптимальность не гарантируется.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from chipcalc.allocator.denomination_pool import PYRAMID_TARGETS, pyramid_targets
from chipcalc.config import Settings
from chipcalc.core.domain.denomination import Denomination
from chipcalc.core.domain.distribution import (
    AllocationLine,
    DistributionResult,
    Recommendation,
)
from chipcalc.core.domain.game_settings import GameSettings
from chipcalc.core.math.currency import DEFAULT_CURRENCY_SYMBOL, format_currency
from chipcalc.core.math.numerical_safeguards import (
    EPS_CALC,
    EXACT_MATCH_TOLERANCE,
    ceil_tolerant,
    floor_tolerant,
    is_exact_match,
    is_valid_float,
    round_half_up,
    safe_divide,
)

logger = logging.getLogger(__name__)


# =============================================================================
# WARNINGS
# =============================================================================

NO_CHIPS_WARNING = "No chips defined"
NON_POSITIVE_BUY_IN_WARNING = "Buy-in must be greater than 0"
NON_POSITIVE_PLAYERS_WARNING = "Number of players must be greater than 0"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AllocatorConfig:
    """Конфигурация аллокатора.

    Значения по умолчанию — каноническая эвристика; переопределяются
    только для экспериментов с формой стека.
    """

    # Пирамида для 3+ номиналов
    pyramid_targets: tuple[int, ...] = PYRAMID_TARGETS

    # Два номинала: целевое количество мелких и их доля в buy-in
    two_type_small_target: int = 15
    two_type_small_share: float = 0.5

    # Минимум фишек на каждый цвет и резерв мелких под сдачу блайндов
    forced_minimum: int = 2
    smallest_reserve: int = 10

    # Рекомендации
    min_chips_per_player: int = 20
    max_chips_per_player: int = 30
    min_stack_big_blinds: float = 100.0

    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    @classmethod
    def from_settings(cls, settings: Settings) -> "AllocatorConfig":
        """Конфигурация по умолчанию с символом валюты из окружения."""
        return cls(currency_symbol=settings.currency_symbol)


# =============================================================================
# ALLOCATOR
# =============================================================================


class DistributionAllocator:
    """Раскладка фишек по номиналам под buy-in.

    Stateless: один экземпляр безопасно использовать из нескольких потоков,
    каждый вызов работает только с собственными локальными копиями.
    """

    def __init__(self, config: AllocatorConfig | None = None):
        """Инициализация аллокатора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or AllocatorConfig()

    def allocate(
        self, settings: GameSettings, chips: Sequence[Denomination] | None
    ) -> DistributionResult:
        """Раскладка по провалидированным настройкам игры."""
        return self.calculate(
            buy_in=settings.buy_in,
            small_blind=settings.small_blind,
            big_blind=settings.big_blind,
            num_players=settings.num_players,
            chips=chips,
        )

    def calculate(
        self,
        *,
        buy_in: float,
        small_blind: float,
        big_blind: float,
        num_players: int,
        chips: Sequence[Denomination] | None,
    ) -> DistributionResult:
        """Расчёт раскладки.

        Args:
            buy_in: стоимость стека одного игрока
            small_blind: малый блайнд
            big_blind: большой блайнд
            num_players: количество игроков
            chips: инвентарь (любой порядок, не изменяется)

        Returns:
            DistributionResult; строки раскладки по возрастанию номинала
        """
        # 1. Вырожденные входы
        if not chips:
            return self._early_exit(NO_CHIPS_WARNING)

        if not is_valid_float(buy_in) or buy_in <= 0:
            return self._early_exit(NON_POSITIVE_BUY_IN_WARNING)

        if num_players <= 0:
            return self._early_exit(NON_POSITIVE_PLAYERS_WARNING)

        # 2. Копия инвентаря по возрастанию номинала
        ordered = sorted(chips, key=lambda chip: chip.value)
        caps = [chip.per_player_cap(num_players) for chip in ordered]
        values = [chip.value for chip in ordered]

        # 3. Стратегия по количеству номиналов
        if len(ordered) == 1:
            strategy = "single"
            quantities = self._allocate_single(values, caps, buy_in)
        elif len(ordered) == 2:
            strategy = "pair"
            quantities = self._allocate_pair(values, caps, buy_in)
        else:
            strategy = "pyramid"
            quantities = self._allocate_pyramid(values, caps, buy_in)

        # 4. Строки раскладки (единственный номинал выводится даже при 0)
        distribution = tuple(
            AllocationLine(denomination=chip, quantity=qty, subtotal=qty * chip.value)
            for chip, qty in zip(ordered, quantities)
            if qty > 0 or len(ordered) == 1
        )

        total_value = sum(line.subtotal for line in distribution)
        total_chips = sum(line.quantity for line in distribution)
        is_valid = is_exact_match(total_value, buy_in)

        warnings = self._collect_warnings(
            distribution=distribution,
            chips=chips,
            buy_in=buy_in,
            small_blind=small_blind,
            num_players=num_players,
            total_value=total_value,
            total_chips=total_chips,
            is_valid=is_valid,
        )

        logger.debug(
            "calculate_distribution: strategy=%s types=%d total_value=%s "
            "total_chips=%d is_valid=%s warnings=%d",
            strategy,
            len(ordered),
            total_value,
            total_chips,
            is_valid,
            len(warnings),
        )

        return DistributionResult(
            distribution=distribution,
            total_value=total_value,
            total_chips=total_chips,
            is_valid=is_valid,
            warnings=tuple(warnings),
            recommendation=Recommendation(
                min_stack=big_blind * self.config.min_stack_big_blinds,
                ideal_chip_count=(
                    f"{self.config.min_chips_per_player}-{self.config.max_chips_per_player}"
                ),
            ),
        )

    # -------------------------------------------------------------------------
    # Стратегии
    # -------------------------------------------------------------------------

    def _allocate_single(self, values: list[float], caps: list[int], buy_in: float) -> list[int]:
        """Один номинал: round(buy_in / value), ограничено cap."""
        quantity = round_half_up(safe_divide(buy_in, values[0]))
        return [max(0, min(quantity, caps[0]))]

    def _allocate_pair(self, values: list[float], caps: list[int], buy_in: float) -> list[int]:
        """Два номинала: мелкие под блайнды, остаток крупными, хвост мелкими."""
        small_value, large_value = values
        small_cap, large_cap = caps

        small_target = min(
            self.config.two_type_small_target,
            floor_tolerant(safe_divide(buy_in * self.config.two_type_small_share, small_value)),
        )
        small_qty = min(small_target, small_cap)
        small_total = small_qty * small_value

        large_qty = min(round_half_up(safe_divide(buy_in - small_total, large_value)), large_cap)
        large_qty = max(large_qty, 0)

        # Остаток добираем мелкими; при упоре в cap ошибка остаётся в is_valid
        remainder = buy_in - small_total - large_qty * large_value
        additional_small = round_half_up(safe_divide(remainder, small_value))
        small_qty = max(0, min(small_qty + additional_small, small_cap))

        return [small_qty, large_qty]

    def _allocate_pyramid(self, values: list[float], caps: list[int], buy_in: float) -> list[int]:
        """Пирамида для 3+ номиналов.

        Порядок:
        1. Целевые количества пирамиды, ограниченные cap
        2. Перебор: снимаем крупные, пока сумма >= buy_in; затем — пока перебор
        3. Недобор: доливаем младший номинал
        4. Каждый нулевой старший номинал получает минимум за счёт младшего
        5. Финальный долив младшим номиналом
        """
        targets = pyramid_targets(len(values), self.config.pyramid_targets)
        quantities = [min(target, cap) for target, cap in zip(targets, caps)]

        if _total(quantities, values) - buy_in >= EXACT_MATCH_TOLERANCE:
            self._trim_from_largest(quantities, values, buy_in)

        self._top_up_smallest(quantities, values, caps, buy_in)
        self._force_color_variety(quantities, values, caps)
        self._top_up_smallest(quantities, values, caps, buy_in)

        return quantities

    def _trim_from_largest(self, quantities: list[int], values: list[float], buy_in: float) -> None:
        total = _total(quantities, values)

        # Проход 1: не опускаемся ниже buy-in
        for i in range(len(values) - 1, -1, -1):
            while quantities[i] > 0 and values[i] > 0 and total - values[i] >= buy_in - EPS_CALC:
                quantities[i] -= 1
                total -= values[i]

        # Проход 2: безусловно, кроме младшего номинала
        for i in range(len(values) - 1, 0, -1):
            while quantities[i] > 0 and values[i] > 0 and total - buy_in >= EXACT_MATCH_TOLERANCE:
                quantities[i] -= 1
                total -= values[i]

    def _top_up_smallest(
        self, quantities: list[int], values: list[float], caps: list[int], buy_in: float
    ) -> None:
        gap = buy_in - _total(quantities, values)
        if gap < EXACT_MATCH_TOLERANCE or values[0] <= 0:
            return

        headroom = caps[0] - quantities[0]
        additional = min(ceil_tolerant(safe_divide(gap, values[0])), headroom)
        if additional > 0:
            quantities[0] += additional

    def _force_color_variety(
        self, quantities: list[int], values: list[float], caps: list[int]
    ) -> None:
        if values[0] <= 0:
            return

        for i in range(1, len(values)):
            if quantities[i] > 0:
                continue

            forced = min(self.config.forced_minimum, caps[i])
            if forced <= 0:
                continue

            removed = ceil_tolerant(safe_divide(forced * values[i], values[0]))
            # Младший номинал должен сохранить резерв под сдачу блайндов
            if quantities[0] < removed + self.config.smallest_reserve:
                continue

            quantities[i] = forced
            quantities[0] -= removed

    # -------------------------------------------------------------------------
    # Warnings
    # -------------------------------------------------------------------------

    def _collect_warnings(
        self,
        *,
        distribution: tuple[AllocationLine, ...],
        chips: Sequence[Denomination],
        buy_in: float,
        small_blind: float,
        num_players: int,
        total_value: float,
        total_chips: int,
        is_valid: bool,
    ) -> list[str]:
        symbol = self.config.currency_symbol
        warnings = []

        if not is_valid:
            diff = buy_in - total_value
            if diff > 0:
                warnings.append(
                    f"Short {format_currency(diff, symbol)} - "
                    f"smallest chip denomination may be too large"
                )
            else:
                warnings.append(f"Over by {format_currency(-diff, symbol)} - adjust chip values")

        if total_chips < self.config.min_chips_per_player:
            warnings.append(
                f"Only {total_chips} chips per player. "
                f"Consider smaller denominations for more flexibility."
            )

        for line in distribution:
            original = next((chip for chip in chips if chip.color == line.color), None)
            total_needed = line.quantity * num_players
            if original is not None and total_needed > original.quantity:
                warnings.append(
                    f"Need {total_needed} {line.name} chips but only have {original.quantity}"
                )

        # Сдача блайндов: по всему инвентарю, а не только по использованным цветам
        cheapest = min(chips, key=lambda chip: chip.value)
        if cheapest.value > small_blind:
            warnings.append(
                f"Smallest chip ({format_currency(cheapest.value, symbol)}) > "
                f"small blind ({format_currency(small_blind, symbol)}). "
                f"Add smaller denomination."
            )

        return warnings

    def _early_exit(self, reason: str) -> DistributionResult:
        """Результат для вырожденных входов.

        Args:
            reason: текст предупреждения

        Returns:
            DistributionResult с is_valid=False и пустой раскладкой
        """
        logger.debug("calculate_distribution: early exit (%s)", reason)
        return DistributionResult(
            distribution=(),
            total_value=0,
            total_chips=0,
            is_valid=False,
            warnings=(reason,),
        )


def _total(quantities: list[int], values: list[float]) -> float:
    return sum(qty * value for qty, value in zip(quantities, values))


# =============================================================================
# MODULE-LEVEL ENTRY POINT
# =============================================================================

_DEFAULT_ALLOCATOR = DistributionAllocator()


def calculate_distribution(
    *,
    buy_in: float,
    small_blind: float,
    big_blind: float,
    num_players: int,
    chips: Sequence[Denomination] | None,
) -> DistributionResult:
    """
    Раскладка фишек с конфигурацией по умолчанию.

    См. DistributionAllocator.calculate.
    """
    return _DEFAULT_ALLOCATOR.calculate(
        buy_in=buy_in,
        small_blind=small_blind,
        big_blind=big_blind,
        num_players=num_players,
        chips=chips,
    )
