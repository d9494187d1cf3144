"""
Temperature — Модели температурных значений

Шесть immutable Pydantic моделей (по одной на шкалу), каждая хранит одно
float значение в единицах своей шкалы. Все модели удовлетворяют протоколу
Temperature: конверсия в любую шкалу, format(), scale_name().

Конверсии:
- Прямые формулы — только для пар из таблицы в units.py
- Остальные пары — через Цельсий (hub), реализовано один раз в _ScaleValue
- Конверсия в собственную шкалу возвращает тот же экземпляр

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение, созданное через конструктор, не ниже абсолютного нуля
   (для Делиля — не выше 559.725°De)
2. Конверсии не валидируют результат и никогда не поднимают исключений
3. Значения разных шкал не равны друг другу без явной конверсии
"""

from typing import Any, ClassVar, Final, Protocol, Union, runtime_checkable

from pydantic import BaseModel, Field, field_validator

from src.core.domain.units import (
    SCALE_SYMBOLS,
    Scale,
    celsius_to_delisle,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    celsius_to_rankine,
    celsius_to_reaumur,
    delisle_to_celsius,
    fahrenheit_to_celsius,
    fahrenheit_to_kelvin,
    fahrenheit_to_rankine,
    kelvin_to_celsius,
    kelvin_to_rankine,
    rankine_to_celsius,
    rankine_to_fahrenheit,
    rankine_to_kelvin,
    reaumur_to_celsius,
    validate_temperature,
)
from src.core.math.numerical_safeguards import (
    EPS_TEMPERATURE_COMPARE,
    compare_with_tolerance,
    is_close,
)


# =============================================================================
# CAPABILITY CONTRACT
# =============================================================================


@runtime_checkable
class Temperature(Protocol):
    """
    Протокол «любая температура».

    Позволяет работать со значением любой шкалы без знания конкретного типа.
    """

    value: float

    def to_celsius(self) -> "Celsius": ...

    def to_fahrenheit(self) -> "Fahrenheit": ...

    def to_kelvin(self) -> "Kelvin": ...

    def to_rankine(self) -> "Rankine": ...

    def to_reaumur(self) -> "Reaumur": ...

    def to_delisle(self) -> "Delisle": ...

    def format(self) -> str: ...

    def scale_name(self) -> str: ...


# =============================================================================
# BASE MODEL
# =============================================================================


class _ScaleValue(BaseModel):
    """
    Общая основа шкал: валидация абсолютного нуля и конверсии через Цельсий.

    Каждая шкала переопределяет to_celsius(), конверсию в саму себя
    и прямые формулы из таблицы units.py.
    """

    value: float = Field(..., allow_inf_nan=False, description="Значение в единицах шкалы")

    scale: ClassVar[Scale]

    model_config = {"frozen": True}  # Immutable

    def __init__(self, value: float, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def validate_absolute_zero(cls, v: float) -> float:
        """Проверка абсолютного нуля шкалы (BelowAbsoluteZero пробрасывается как есть)."""
        validate_temperature(v, cls.scale)
        return v

    @classmethod
    def _unchecked(cls, value: float) -> Any:
        # Результат конверсии у границы может отличаться от константы на ulp
        return cls.model_construct(value=value)

    def to_celsius(self) -> "Celsius":
        raise NotImplementedError

    def to_fahrenheit(self) -> "Fahrenheit":
        return self.to_celsius().to_fahrenheit()

    def to_kelvin(self) -> "Kelvin":
        return self.to_celsius().to_kelvin()

    def to_rankine(self) -> "Rankine":
        return self.to_celsius().to_rankine()

    def to_reaumur(self) -> "Reaumur":
        return self.to_celsius().to_reaumur()

    def to_delisle(self) -> "Delisle":
        return self.to_celsius().to_delisle()

    def format(self) -> str:
        """Строка вида "25.00°C": два знака после запятой и обозначение шкалы."""
        return f"{self.value:.2f}{SCALE_SYMBOLS[self.scale]}"

    def scale_name(self) -> str:
        return self.scale.value

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return self.format()
        return format(self.value, format_spec)

    def __float__(self) -> float:
        return self.value


# =============================================================================
# SCALE MODELS
# =============================================================================


class Celsius(_ScaleValue):
    """Шкала Цельсия (hub): абсолютный ноль -273.15°C"""

    scale: ClassVar[Scale] = Scale.CELSIUS

    def to_celsius(self) -> "Celsius":
        return self

    def to_fahrenheit(self) -> "Fahrenheit":
        return Fahrenheit._unchecked(celsius_to_fahrenheit(self.value))

    def to_kelvin(self) -> "Kelvin":
        return Kelvin._unchecked(celsius_to_kelvin(self.value))

    def to_rankine(self) -> "Rankine":
        return Rankine._unchecked(celsius_to_rankine(self.value))

    def to_reaumur(self) -> "Reaumur":
        return Reaumur._unchecked(celsius_to_reaumur(self.value))

    def to_delisle(self) -> "Delisle":
        return Delisle._unchecked(celsius_to_delisle(self.value))


class Fahrenheit(_ScaleValue):
    """Шкала Фаренгейта: абсолютный ноль -459.67°F"""

    scale: ClassVar[Scale] = Scale.FAHRENHEIT

    def to_celsius(self) -> Celsius:
        return Celsius._unchecked(fahrenheit_to_celsius(self.value))

    def to_fahrenheit(self) -> "Fahrenheit":
        return self

    def to_kelvin(self) -> "Kelvin":
        return Kelvin._unchecked(fahrenheit_to_kelvin(self.value))

    def to_rankine(self) -> "Rankine":
        return Rankine._unchecked(fahrenheit_to_rankine(self.value))


class Kelvin(_ScaleValue):
    """Шкала Кельвина: абсолютный ноль 0K"""

    scale: ClassVar[Scale] = Scale.KELVIN

    def to_celsius(self) -> Celsius:
        return Celsius._unchecked(kelvin_to_celsius(self.value))

    def to_kelvin(self) -> "Kelvin":
        return self

    def to_rankine(self) -> "Rankine":
        return Rankine._unchecked(kelvin_to_rankine(self.value))


class Rankine(_ScaleValue):
    """Шкала Ранкина: абсолютный ноль 0°R"""

    scale: ClassVar[Scale] = Scale.RANKINE

    def to_celsius(self) -> Celsius:
        return Celsius._unchecked(rankine_to_celsius(self.value))

    def to_fahrenheit(self) -> Fahrenheit:
        return Fahrenheit._unchecked(rankine_to_fahrenheit(self.value))

    def to_kelvin(self) -> Kelvin:
        return Kelvin._unchecked(rankine_to_kelvin(self.value))

    def to_rankine(self) -> "Rankine":
        return self


class Reaumur(_ScaleValue):
    """Шкала Реомюра: абсолютный ноль -218.52°Re"""

    scale: ClassVar[Scale] = Scale.REAUMUR

    def to_celsius(self) -> Celsius:
        return Celsius._unchecked(reaumur_to_celsius(self.value))

    def to_reaumur(self) -> "Reaumur":
        return self


class Delisle(_ScaleValue):
    """
    Шкала Делиля: абсолютный ноль 559.725°De.

    Шкала инвертирована — значение растёт при понижении температуры,
    поэтому абсолютный ноль является верхней границей.
    """

    scale: ClassVar[Scale] = Scale.DELISLE

    def to_celsius(self) -> Celsius:
        return Celsius._unchecked(delisle_to_celsius(self.value))

    def to_delisle(self) -> "Delisle":
        return self


SCALE_TYPES: Final[dict[Scale, type[_ScaleValue]]] = {
    Scale.CELSIUS: Celsius,
    Scale.FAHRENHEIT: Fahrenheit,
    Scale.KELVIN: Kelvin,
    Scale.RANKINE: Rankine,
    Scale.REAUMUR: Reaumur,
    Scale.DELISLE: Delisle,
}

_CONVERTERS: Final[dict[Scale, str]] = {
    Scale.CELSIUS: "to_celsius",
    Scale.FAHRENHEIT: "to_fahrenheit",
    Scale.KELVIN: "to_kelvin",
    Scale.RANKINE: "to_rankine",
    Scale.REAUMUR: "to_reaumur",
    Scale.DELISLE: "to_delisle",
}


# =============================================================================
# ВАЛИДИРУЮЩИЕ КОНСТРУКТОРЫ
# =============================================================================


def new_celsius(value: float) -> Celsius:
    """
    Создание температуры по Цельсию.

    Raises:
        BelowAbsoluteZero: Если value < -273.15
    """
    return Celsius(value)


def new_fahrenheit(value: float) -> Fahrenheit:
    """
    Создание температуры по Фаренгейту.

    Raises:
        BelowAbsoluteZero: Если value < -459.67
    """
    return Fahrenheit(value)


def new_kelvin(value: float) -> Kelvin:
    """
    Создание температуры по Кельвину.

    Raises:
        BelowAbsoluteZero: Если value < 0
    """
    return Kelvin(value)


def new_rankine(value: float) -> Rankine:
    """
    Создание температуры по Ранкину.

    Raises:
        BelowAbsoluteZero: Если value < 0
    """
    return Rankine(value)


def new_reaumur(value: float) -> Reaumur:
    """
    Создание температуры по Реомюру.

    Raises:
        BelowAbsoluteZero: Если value < -218.52
    """
    return Reaumur(value)


def new_delisle(value: float) -> Delisle:
    """
    Создание температуры по Делилю.

    Проверка инвертирована: допустимы значения НЕ ВЫШЕ 559.725°De.

    Raises:
        BelowAbsoluteZero: Если value > 559.725
    """
    return Delisle(value)


def new_temperature(value: float, scale: Union[Scale, str]) -> Temperature:
    """
    Создание температуры в шкале, заданной Scale или её названием ("Kelvin").

    Raises:
        ValueError: Если шкала неизвестна
        BelowAbsoluteZero: Если значение за абсолютным нулём шкалы
    """
    return SCALE_TYPES[Scale(scale)](value)


# =============================================================================
# ОБОБЩЁННЫЕ ОПЕРАЦИИ
# =============================================================================


def convert(temperature: Temperature, scale: Union[Scale, str]) -> Temperature:
    """
    Конверсия температуры в заданную шкалу.

    Эквивалентно вызову соответствующего to_<scale>().
    """
    return getattr(temperature, _CONVERTERS[Scale(scale)])()


def is_equivalent(
    a: Temperature,
    b: Temperature,
    abs_tol: float = EPS_TEMPERATURE_COMPARE,
) -> bool:
    """
    Одна ли физическая температура у двух значений (возможно, разных шкал).

    Сравнение выполняется в Цельсиях с абсолютной толерантностью.

    Examples:
        >>> is_equivalent(Celsius(100.0), Fahrenheit(212.0))
        True
        >>> is_equivalent(Kelvin(0.0), Delisle(559.725))
        True
    """
    return is_close(a.to_celsius().value, b.to_celsius().value, rel_tol=0.0, abs_tol=abs_tol)


def compare_temperatures(
    a: Temperature,
    b: Temperature,
    tol: float = EPS_TEMPERATURE_COMPARE,
) -> int:
    """
    Физическое сравнение двух температур.

    Сравнение выполняется в Цельсиях, поэтому инвертированная шкала Делиля
    упорядочивается корректно: Delisle(0) горячее, чем Delisle(150).

    Returns:
        -1 если a холоднее b, 0 если равны в пределах tol, +1 если a горячее b
    """
    return compare_with_tolerance(a.to_celsius().value, b.to_celsius().value, tol=tol)
