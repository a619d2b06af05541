"""
Тесты для доменных моделей: Denomination, GameSettings, результаты

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Immutability (frozen=True)
3. Per-player cap
4. Значения по умолчанию
"""

import pytest
from pydantic import ValidationError

from chipcalc.core.domain import (
    AllocationLine,
    Denomination,
    DistributionResult,
    GameSettings,
    default_chips,
)


# =============================================================================
# DENOMINATION TESTS
# =============================================================================


class TestDenomination:
    """Тесты для модели Denomination"""

    @pytest.fixture
    def red(self) -> Denomination:
        return Denomination(id="2", color="#E53935", name="Red", value=1, quantity=100)

    def test_per_player_cap(self, red):
        assert red.per_player_cap(6) == 16
        assert red.per_player_cap(1) == 100
        assert red.per_player_cap(101) == 0

    def test_frozen(self, red):
        with pytest.raises(ValidationError):
            red.value = 5

    def test_with_value_returns_copy(self, red):
        revalued = red.with_value(5)

        assert revalued.value == 5
        assert revalued.color == red.color
        assert red.value == 1

    def test_fractional_value_allowed(self):
        chip = Denomination(id="w", color="#FFF", name="White", value=0.25, quantity=10)

        assert chip.value == 0.25

    @pytest.mark.parametrize(
        "field,value",
        [("value", -1), ("quantity", -5), ("color", ""), ("id", "")],
    )
    def test_invalid(self, field, value):
        data = {"id": "1", "color": "#FFF", "name": "White", "value": 1, "quantity": 10}
        data[field] = value

        with pytest.raises(ValidationError):
            Denomination(**data)

    def test_default_chips(self):
        chips = default_chips()

        assert [chip.name for chip in chips] == ["White", "Red", "Blue", "Black"]
        assert [chip.value for chip in chips] == [0.5, 1, 5, 25]
        assert [chip.quantity for chip in chips] == [100, 100, 50, 50]
        assert len({chip.color for chip in chips}) == 4


# =============================================================================
# GAME SETTINGS TESTS
# =============================================================================


class TestGameSettings:
    """Тесты для модели GameSettings"""

    def test_default(self):
        settings = GameSettings.default()

        assert settings.buy_in == 50
        assert settings.small_blind == 0.5
        assert settings.big_blind == 1
        assert settings.num_players == 6

    def test_big_blind_not_enforced(self):
        settings = GameSettings(buy_in=100, small_blind=1, big_blind=3, num_players=4)

        assert settings.big_blind == 3

    @pytest.mark.parametrize(
        "field,value",
        [("buy_in", 0), ("buy_in", -10), ("num_players", 0), ("small_blind", -1)],
    )
    def test_invalid(self, field, value):
        data = {"buy_in": 50, "small_blind": 0.5, "big_blind": 1, "num_players": 6}
        data[field] = value

        with pytest.raises(ValidationError):
            GameSettings(**data)

    def test_round_trip_json(self):
        settings = GameSettings(buy_in=20, small_blind=0.1, big_blind=0.2, num_players=9)

        restored = GameSettings.model_validate_json(settings.model_dump_json())

        assert restored == settings


# =============================================================================
# RESULT TESTS
# =============================================================================


class TestDistributionResult:
    """Тесты для DistributionResult"""

    def test_quantity_of(self):
        red, blue = default_chips()[1:3]
        result = DistributionResult(
            distribution=(
                AllocationLine(denomination=red, quantity=10, subtotal=10),
                AllocationLine(denomination=blue, quantity=8, subtotal=40),
            ),
            total_value=50,
            total_chips=18,
            is_valid=True,
            warnings=(),
        )

        assert result.quantity_of(red.color) == 10
        assert result.quantity_of(blue.color) == 8
        assert result.quantity_of("#000000") == 0

    def test_early_exit_to_dict(self):
        result = DistributionResult(
            distribution=(), total_value=0, total_chips=0, is_valid=False, warnings=("x",)
        )

        assert result.to_dict() == {
            "distribution": [],
            "total_value": 0,
            "total_chips": 0,
            "is_valid": False,
            "warnings": ["x"],
            "recommendation": None,
        }
