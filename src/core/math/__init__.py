"""
Core math modules для tempconv

Численные примитивы для сравнения температур с гарантией стабильности.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_TEMPERATURE_COMPARE,
    # NaN/Inf detection
    is_valid_float,
    # Epsilon comparisons
    compare_with_tolerance,
    is_close,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_TEMPERATURE_COMPARE",
    # Numerical Safeguards — NaN/Inf detection
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "compare_with_tolerance",
    "is_close",
]
