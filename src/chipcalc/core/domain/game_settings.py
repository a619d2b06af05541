"""
GameSettings — Параметры домашней игры

Immutable Pydantic модель: buy-in на игрока, блайнды и количество игроков.
big_blind = 2 * small_blind — конвенция, но не требование.
"""

from pydantic import BaseModel, Field


class GameSettings(BaseModel):
    """Параметры игры, для которой считается раскладка фишек."""

    buy_in: float = Field(..., gt=0, description="Стоимость стартового стека одного игрока")
    small_blind: float = Field(..., ge=0, description="Малый блайнд")
    big_blind: float = Field(..., ge=0, description="Большой блайнд")
    num_players: int = Field(..., ge=1, description="Количество игроков")

    model_config = {"frozen": True}

    @classmethod
    def default(cls) -> "GameSettings":
        """Настройки по умолчанию: buy-in 50, блайнды 0.50/1, 6 игроков."""
        return cls(buy_in=50, small_blind=0.50, big_blind=1, num_players=6)
