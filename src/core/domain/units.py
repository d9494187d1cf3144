"""
TemperatureUnits — Централизованный модуль конверсии температурных шкал

Единственный допустимый способ преобразований между шкалами:
- Цельсий (°C)
- Фаренгейт (°F)
- Кельвин (K)
- Ранкин (°R)
- Реомюр (°Re)
- Делиль (°De)

Цельсий — опорная шкала (hub). Прямые формулы определены только для пар
из таблицы ниже, остальные пары считаются через Цельсий.

ЗАПРЕЩЕНО смешивать шкалы без явного конвертера из этого модуля.
"""

import logging
from enum import Enum
from typing import Final

from src.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Scale(str, Enum):
    """Температурная шкала"""

    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"
    RANKINE = "Rankine"
    REAUMUR = "Reaumur"
    DELISLE = "Delisle"


# Обозначения единиц (используются в format() и сообщениях об ошибках)
SCALE_SYMBOLS: Final[dict[Scale, str]] = {
    Scale.CELSIUS: "°C",
    Scale.FAHRENHEIT: "°F",
    Scale.KELVIN: "K",
    Scale.RANKINE: "°R",
    Scale.REAUMUR: "°Re",
    Scale.DELISLE: "°De",
}


# =============================================================================
# АБСОЛЮТНЫЙ НОЛЬ
# =============================================================================

ABSOLUTE_ZERO_C: Final[float] = -273.15
ABSOLUTE_ZERO_F: Final[float] = -459.67
ABSOLUTE_ZERO_K: Final[float] = 0.0
ABSOLUTE_ZERO_R: Final[float] = 0.0
ABSOLUTE_ZERO_RE: Final[float] = -218.52

# Шкала Делиля инвертирована: абсолютный ноль — ВЕРХНЯЯ граница
ABSOLUTE_ZERO_DE: Final[float] = 559.725

ABSOLUTE_ZERO: Final[dict[Scale, float]] = {
    Scale.CELSIUS: ABSOLUTE_ZERO_C,
    Scale.FAHRENHEIT: ABSOLUTE_ZERO_F,
    Scale.KELVIN: ABSOLUTE_ZERO_K,
    Scale.RANKINE: ABSOLUTE_ZERO_R,
    Scale.REAUMUR: ABSOLUTE_ZERO_RE,
    Scale.DELISLE: ABSOLUTE_ZERO_DE,
}


# =============================================================================
# КОЭФФИЦИЕНТЫ ПРЕОБРАЗОВАНИЯ
# =============================================================================

C_TO_F_MULTIPLIER: Final[float] = 9.0 / 5.0
C_TO_F_OFFSET: Final[float] = 32.0
C_TO_K_OFFSET: Final[float] = 273.15
C_TO_RE_MULTIPLIER: Final[float] = 4.0 / 5.0
C_TO_DE_OFFSET: Final[float] = 100.0
C_TO_DE_MULTIPLIER: Final[float] = 3.0 / 2.0

F_TO_C_MULTIPLIER: Final[float] = 5.0 / 9.0
F_TO_R_OFFSET: Final[float] = 459.67

# Точка замерзания воды по Ранкину: 459.67 + 32
R_TO_C_OFFSET: Final[float] = 491.67

RE_TO_C_MULTIPLIER: Final[float] = 5.0 / 4.0
DE_TO_C_MULTIPLIER: Final[float] = 2.0 / 3.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BelowAbsoluteZero(Exception):
    """
    Температура физически невозможна: ниже абсолютного нуля своей шкалы.

    Для шкалы Делиля — выше 559.725°De (шкала инвертирована).

    Поднимается только валидирующими конструкторами. Конверсии и
    форматирование никогда не поднимают это исключение.

    Attributes:
        value: Отклонённое значение
        scale: Шкала значения
        label: Обозначение единицы (например, "°C")
    """

    def __init__(self, value: float, scale: Scale) -> None:
        self.value = value
        self.scale = scale
        self.label = SCALE_SYMBOLS[scale]
        super().__init__(
            f"Temperature {value:.2f} {self.label} is below absolute zero "
            f"({ABSOLUTE_ZERO[scale]} {self.label})"
        )


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_inverted(scale: Scale) -> bool:
    """Растёт ли значение шкалы при понижении температуры (только Делиль)."""
    return scale is Scale.DELISLE


def validate_temperature(value: float, scale: Scale) -> None:
    """
    Проверка, что температура не ниже абсолютного нуля своей шкалы.

    Значение, равное абсолютному нулю, допустимо.

    Args:
        value: Значение в единицах шкалы
        scale: Шкала значения

    Raises:
        ValueError: Если значение NaN/Inf
        BelowAbsoluteZero: Если value < абсолютного нуля
            (для Делиля: value > 559.725)
    """
    if not is_valid_float(value):
        raise ValueError(f"Temperature contains NaN/Inf: {value}")

    absolute_zero = ABSOLUTE_ZERO[scale]
    if is_inverted(scale):
        violated = value > absolute_zero
    else:
        violated = value < absolute_zero

    if violated:
        logger.debug(
            "Rejected %s value %r: beyond absolute zero %r", scale.value, value, absolute_zero
        )
        raise BelowAbsoluteZero(value, scale)


# =============================================================================
# ПРЯМЫЕ КОНВЕРТЕРЫ (таблица формул)
# =============================================================================


def celsius_to_fahrenheit(c: float) -> float:
    """C → F: F = C * 9/5 + 32"""
    return c * C_TO_F_MULTIPLIER + C_TO_F_OFFSET


def celsius_to_kelvin(c: float) -> float:
    """C → K: K = C + 273.15"""
    return c + C_TO_K_OFFSET


def celsius_to_rankine(c: float) -> float:
    """C → R: R = (C + 273.15) * 9/5"""
    return (c + C_TO_K_OFFSET) * C_TO_F_MULTIPLIER


def celsius_to_reaumur(c: float) -> float:
    """C → Re: Re = C * 4/5"""
    return c * C_TO_RE_MULTIPLIER


def celsius_to_delisle(c: float) -> float:
    """
    C → De: De = (100 - C) * 3/2

    Шкала Делиля убывает с ростом температуры: 100°C = 0°De.
    """
    return (C_TO_DE_OFFSET - c) * C_TO_DE_MULTIPLIER


def fahrenheit_to_celsius(f: float) -> float:
    """F → C: C = (F - 32) * 5/9"""
    return (f - C_TO_F_OFFSET) * F_TO_C_MULTIPLIER


def fahrenheit_to_kelvin(f: float) -> float:
    """F → K: K = (F - 32) * 5/9 + 273.15"""
    return (f - C_TO_F_OFFSET) * F_TO_C_MULTIPLIER + C_TO_K_OFFSET


def fahrenheit_to_rankine(f: float) -> float:
    """F → R: R = F + 459.67"""
    return f + F_TO_R_OFFSET


def kelvin_to_celsius(k: float) -> float:
    """K → C: C = K - 273.15"""
    return k - C_TO_K_OFFSET


def kelvin_to_rankine(k: float) -> float:
    """K → R: R = K * 9/5"""
    return k * C_TO_F_MULTIPLIER


def rankine_to_celsius(r: float) -> float:
    """
    R → C: C = (R - 491.67) * 5/9

    491.67 = 459.67 + 32: сдвиг Фаренгейта плюс точка замерзания.
    """
    return (r - R_TO_C_OFFSET) * F_TO_C_MULTIPLIER


def rankine_to_fahrenheit(r: float) -> float:
    """R → F: F = R - 459.67"""
    return r - F_TO_R_OFFSET


def rankine_to_kelvin(r: float) -> float:
    """R → K: K = R * 5/9"""
    return r * F_TO_C_MULTIPLIER


def reaumur_to_celsius(re: float) -> float:
    """Re → C: C = Re * 5/4"""
    return re * RE_TO_C_MULTIPLIER


def delisle_to_celsius(de: float) -> float:
    """De → C: C = 100 - De * 2/3"""
    return C_TO_DE_OFFSET - de * DE_TO_C_MULTIPLIER
