"""
Core math modules для chipcalc

Численные примитивы и форматирование сумм.
"""

# Numerical Safeguards
from chipcalc.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EXACT_MATCH_TOLERANCE,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_float,
    # Safe division
    safe_divide,
    # Rounding
    ceil_tolerant,
    floor_tolerant,
    round_half_up,
    # Comparisons
    is_exact_match,
)

# Currency
from chipcalc.core.math.currency import (
    DEFAULT_CURRENCY_SYMBOL,
    format_currency,
    format_plain_number,
)

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPS_CALC",
    "EXACT_MATCH_TOLERANCE",
    # Numerical Safeguards: NaN/Inf sanitization
    "is_valid_float",
    "sanitize_float",
    # Numerical Safeguards: Safe division
    "safe_divide",
    # Numerical Safeguards: Rounding
    "ceil_tolerant",
    "floor_tolerant",
    "round_half_up",
    # Numerical Safeguards: Comparisons
    "is_exact_match",
    # Currency
    "DEFAULT_CURRENCY_SYMBOL",
    "format_currency",
    "format_plain_number",
]
