"""Тесты для Value Suggester

Покрытие:
- Fractional blinds: первые два номинала = SB и BB
- Integer blinds: равномерная выборка, round half-up индексов
- Граничные случаи: 0/1 цвет, пул исчерпан
- apply_suggested_values: переоценка без изменения входа
- Правило 100 big blinds
"""

import pytest

from chipcalc.allocator import (
    DENOMINATION_POOL,
    apply_suggested_values,
    suggest_blinds,
    suggest_buy_in,
    suggest_chip_values,
)
from chipcalc.core.domain import default_chips


# =============================================================================
# FRACTIONAL BLINDS
# =============================================================================


class TestFractionalBlinds:
    """SB < 1 или BB < 1."""

    def test_half_dollar_small_blind(self):
        # BB = 1 не < 1, но SB = 0.5 < 1 → fractional
        assert suggest_chip_values(0.5, 50, 4) == [0.5, 1, 2, 5]

    def test_dime_small_blind(self):
        assert suggest_chip_values(0.1, 10, 4) == [0.1, 0.2, 0.25, 0.5]

    def test_pool_exhausted_returns_fewer(self):
        # Над BB = 1 и не выше max(2 / 2, 1) = 1 в пуле ничего нет
        assert suggest_chip_values(0.5, 2, 6) == [0.5, 1]

    def test_single_type(self):
        assert suggest_chip_values(0.25, 10, 1) == [0.25]

    @pytest.mark.parametrize("small_blind", [0.05, 0.1, 0.25, 0.5])
    def test_first_two_are_blinds(self, small_blind):
        values = suggest_chip_values(small_blind, 100, 5)

        assert values[0] == small_blind
        assert values[1] == small_blind * 2


# =============================================================================
# INTEGER BLINDS
# =============================================================================


class TestIntegerBlinds:
    """Равномерная выборка целых номиналов пула."""

    def test_evenly_spaced(self):
        # Кандидаты [1, 2, 5, 10, 20, 25, 50], шаг 2
        assert suggest_chip_values(1, 100, 4) == [1, 5, 20, 50]

    def test_evenly_spaced_three(self):
        assert suggest_chip_values(5, 100, 3) == [1, 10, 50]

    def test_index_rounds_half_up(self):
        # Кандидаты [1, 2, 5, 10, 20, 25], шаг 2.5 → индексы 0, 3, 5
        assert suggest_chip_values(1, 50, 3) == [1, 10, 25]

    def test_all_candidates_when_few(self):
        assert suggest_chip_values(1, 20, 10) == [1, 2, 5, 10]

    def test_single_type_takes_smallest(self):
        assert suggest_chip_values(1, 100, 1) == [1]

    def test_max_value_from_blinds(self):
        # buy_in / 2 = 5 < 2 * SB = 50
        assert suggest_chip_values(25, 10, 10) == [1, 2, 5, 10, 20, 25, 50]


# =============================================================================
# POSTCONDITIONS
# =============================================================================


class TestPostconditions:
    """Результат строго возрастает и не длиннее запроса."""

    def test_zero_types(self):
        assert suggest_chip_values(1, 100, 0) == []

    @pytest.mark.parametrize("small_blind", [0.1, 0.25, 0.5, 1, 2, 5, 25])
    @pytest.mark.parametrize("buy_in", [1, 10, 50, 100, 1000])
    @pytest.mark.parametrize("num_chip_types", [1, 2, 3, 4, 6, 8])
    def test_strictly_ascending(self, small_blind, buy_in, num_chip_types):
        values = suggest_chip_values(small_blind, buy_in, num_chip_types)

        assert values == sorted(set(values))
        assert 0 < len(values) <= num_chip_types

    def test_integer_mode_uses_pool(self):
        values = suggest_chip_values(2, 500, 5)

        assert all(value in DENOMINATION_POOL for value in values)


# =============================================================================
# APPLY TO INVENTORY
# =============================================================================


class TestApplySuggestedValues:
    """Переоценка инвентаря."""

    def test_revalues_by_rank(self):
        chips = default_chips()

        revalued = apply_suggested_values(chips, small_blind=0.5, buy_in=50)

        assert [(chip.name, chip.value) for chip in revalued] == [
            ("White", 0.5),
            ("Red", 1),
            ("Blue", 2),
            ("Black", 5),
        ]

    def test_input_not_mutated(self):
        chips = list(reversed(default_chips()))
        snapshot = [chip.model_dump() for chip in chips]

        apply_suggested_values(chips, small_blind=0.5, buy_in=50)

        assert [chip.model_dump() for chip in chips] == snapshot

    def test_extra_colors_keep_value(self):
        chips = default_chips()

        # Над BB = 1 и не выше 1 пул пуст: предложено только [0.5, 1]
        revalued = apply_suggested_values(chips, small_blind=0.5, buy_in=2)

        assert [chip.value for chip in revalued] == [0.5, 1, 5, 25]

    def test_empty(self):
        assert apply_suggested_values([], small_blind=1, buy_in=100) == []


# =============================================================================
# 100 BIG BLINDS
# =============================================================================


class TestBuyInRule:
    def test_suggest_buy_in(self):
        assert suggest_buy_in(2) == 200

    def test_suggest_blinds(self):
        assert suggest_blinds(100) == (0.5, 1)
