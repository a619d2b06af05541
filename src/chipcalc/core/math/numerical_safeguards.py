"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость расчётов раскладки фишек:
- Безопасное деление с защитой от деления на ноль (номинал 0 не роняет расчёт)
- NaN/Inf санитизация
- Округление half-up (совместимое с Math.round UI-оболочки)
- Толерантные floor/ceil для частных вида 0.3 / 0.1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Проверка точного попадания в buy-in использует абсолютную толерантность 0.01
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений и сравнений внутри циклов аллокатора
EPS_CALC: Final[float] = 1e-9

# Абсолютная толерантность "раскладка совпала с buy-in"
# Значение фиксировано: от него зависит паритет is_valid на граничных случаях
EXACT_MATCH_TOLERANCE: Final[float] = 0.01

# Количество знаков для нормализации частного перед floor/ceil
QUOTIENT_ROUND_DIGITS: Final[int] = 9


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
) -> float:
    """
    Безопасное деление с защитой от деления на ноль и NaN/Inf.

    Номинал фишки может быть равен 0 (пользователь ещё не задал стоимость),
    поэтому все деления на номинал идут через эту функцию.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при делении на ноль (default: 0.0)

    Returns:
        Результат деления или fallback при делении на ноль

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
        >>> safe_divide(10.0, 0.0, fallback=math.inf)
        inf
    """
    num_clean = sanitize_float(numerator, fallback=0.0)
    denom_clean = sanitize_float(denominator, fallback=0.0)

    if denom_clean == 0.0:
        return fallback

    return sanitize_float(num_clean / denom_clean, fallback=fallback)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление до целого, половины — вверх (к +inf).

    Совпадает с Math.round: round_half_up(2.5) == 3, round_half_up(-2.5) == -2.
    Встроенный round() использует banker's rounding и здесь не подходит.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
        >>> round_half_up(1.49)
        1
    """
    return math.floor(value + 0.5)


def floor_tolerant(value: float) -> int:
    """
    floor() с нормализацией шума float.

    Examples:
        >>> floor_tolerant(0.3 / 0.1)  # 2.9999999999999996
        3
        >>> floor_tolerant(2.7)
        2
    """
    return math.floor(round(value, QUOTIENT_ROUND_DIGITS))


def ceil_tolerant(value: float) -> int:
    """
    ceil() с нормализацией шума float.

    Examples:
        >>> ceil_tolerant(0.30000000000000004 / 0.1)
        3
        >>> ceil_tolerant(2.1)
        3
    """
    return math.ceil(round(value, QUOTIENT_ROUND_DIGITS))


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def is_exact_match(actual: float, target: float) -> bool:
    """
    Проверка попадания суммы в целевое значение.

    Алгоритм:
        abs(actual - target) < EXACT_MATCH_TOLERANCE

    Args:
        actual: Фактическая сумма
        target: Целевая сумма

    Returns:
        True если разница строго меньше 0.01
    """
    return abs(actual - target) < EXACT_MATCH_TOLERANCE
