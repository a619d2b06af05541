"""
Currency — форматирование сумм для текстов предупреждений

Правило отображения:
- value >= 1: без дробной части, если значение целое, иначе 2 знака
- value < 1: всегда 2 знака

Вывод встраивается в тексты предупреждений дословно, поэтому формат
зафиксирован и не зависит от локали.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

DEFAULT_CURRENCY_SYMBOL: Final[str] = "$"

_CENTS: Final[Decimal] = Decimal("0.01")


def format_currency(value: float, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Форматирование суммы с символом валюты.

    Examples:
        >>> format_currency(5)
        '$5'
        >>> format_currency(2.5)
        '$2.50'
        >>> format_currency(0.5)
        '$0.50'
        >>> format_currency(0.125)
        '$0.13'
    """
    if value >= 1 and value % 1 == 0:
        return f"{symbol}{value:.0f}"
    # Половины округляются вверх, как в UI-оболочке
    cents = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{symbol}{cents}"


def format_plain_number(value: float) -> str:
    """
    Кратчайшее текстовое представление числа без хвоста ".0".

    Examples:
        >>> format_plain_number(5.0)
        '5'
        >>> format_plain_number(0.5)
        '0.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
