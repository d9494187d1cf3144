"""
Numerical Safeguards — Safe Float Comparison Primitives

Модуль обеспечивает корректное сравнение температур в float:
- NaN/Inf детекция для предотвращения распространения невалидных значений
- Epsilon-защиты для сравнений float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не принимаются валидирующими конструкторами
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Толерантность для сравнения физических температур между шкалами
# (два знака после запятой — точность format())
EPS_TEMPERATURE_COMPARE: Final[float] = 0.01


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
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


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(-459.67, -273.15 * 9 / 5 + 32)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1
