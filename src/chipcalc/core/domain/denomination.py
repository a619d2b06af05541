"""
Denomination — Модель номинала фишки

Immutable Pydantic модель одного цвета фишек из инвентаря игрока-хоста:
цвет, отображаемое имя, стоимость и количество фишек этого цвета
(общее на всех игроков).

Идентичность — по цвету. id используется UI-оболочкой для поиска и должен
соответствовать цвету.
"""

from pydantic import BaseModel, Field


# =============================================================================
# DENOMINATION MODEL
# =============================================================================


class Denomination(BaseModel):
    """
    Номинал фишки с инвентарём.

    Immutable модель (frozen=True): ядро никогда не изменяет входные данные,
    переоценка фишки создаёт новый экземпляр через model_copy(update=...).
    """

    id: str = Field(..., min_length=1, description="Идентификатор для поиска в UI")
    color: str = Field(..., min_length=1, description="Цвет фишки (например, '#E53935')")
    name: str = Field(..., description="Отображаемое имя (например, 'Red')")
    value: float = Field(..., ge=0, description="Стоимость одной фишки (может быть дробной)")
    quantity: int = Field(..., ge=0, description="Количество фишек этого цвета в наличии")

    model_config = {"frozen": True}

    def per_player_cap(self, num_players: int) -> int:
        """
        Максимум фишек этого цвета на одного игрока.

        Args:
            num_players: Количество игроков (> 0)

        Returns:
            floor(quantity / num_players)
        """
        return self.quantity // num_players

    def with_value(self, value: float) -> "Denomination":
        """Копия номинала с новой стоимостью."""
        return self.model_copy(update={"value": value})


# =============================================================================
# DEFAULTS
# =============================================================================


def default_chips() -> list[Denomination]:
    """
    Стартовый набор фишек для новой игры.

    Returns:
        White 0.50, Red 1, Blue 5, Black 25
    """
    return [
        Denomination(id="1", color="#FFFFFF", name="White", quantity=100, value=0.50),
        Denomination(id="2", color="#E53935", name="Red", quantity=100, value=1),
        Denomination(id="3", color="#1E88E5", name="Blue", quantity=50, value=5),
        Denomination(id="4", color="#212121", name="Black", quantity=50, value=25),
    ]
