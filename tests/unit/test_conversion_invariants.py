"""
Тесты инвариантов конверсии температур

Проверяет:
1. Тождественность конверсии в собственную шкалу (точное значение)
2. Согласованность маршрутизации через Цельсий для всех непрямых пар
3. Согласие всех шкал в точке абсолютного нуля
4. Реперные точки (замерзание и кипение воды)
5. Границы валидации для всех шести шкал (включая инвертированный Делиль)
"""

import itertools

import pytest

from src.core.domain import (
    ABSOLUTE_ZERO,
    SCALE_TYPES,
    BelowAbsoluteZero,
    Celsius,
    Scale,
    convert,
    new_celsius,
    new_delisle,
    new_fahrenheit,
    new_kelvin,
    new_rankine,
    new_reaumur,
    new_temperature,
)
from src.core.math.numerical_safeguards import EPS_TEMPERATURE_COMPARE

# Пары с прямой формулой (остальные считаются через Цельсий)
DIRECT_PAIRS = {
    (Scale.CELSIUS, Scale.FAHRENHEIT),
    (Scale.CELSIUS, Scale.KELVIN),
    (Scale.CELSIUS, Scale.RANKINE),
    (Scale.CELSIUS, Scale.REAUMUR),
    (Scale.CELSIUS, Scale.DELISLE),
    (Scale.FAHRENHEIT, Scale.CELSIUS),
    (Scale.FAHRENHEIT, Scale.KELVIN),
    (Scale.FAHRENHEIT, Scale.RANKINE),
    (Scale.KELVIN, Scale.CELSIUS),
    (Scale.KELVIN, Scale.RANKINE),
    (Scale.RANKINE, Scale.CELSIUS),
    (Scale.RANKINE, Scale.FAHRENHEIT),
    (Scale.RANKINE, Scale.KELVIN),
    (Scale.REAUMUR, Scale.CELSIUS),
    (Scale.DELISLE, Scale.CELSIUS),
}

ALL_PAIRS = [(a, b) for a, b in itertools.product(Scale, Scale) if a is not b]
HUB_PAIRS = [pair for pair in ALL_PAIRS if pair not in DIRECT_PAIRS]

# Типичные значения каждой шкалы (в допустимом диапазоне)
SAMPLES = {
    Scale.CELSIUS: [-273.15, -40.0, 0.0, 21.5, 100.0],
    Scale.FAHRENHEIT: [-459.67, -40.0, 32.0, 98.6, 212.0],
    Scale.KELVIN: [0.0, 77.0, 273.15, 373.15],
    Scale.RANKINE: [0.0, 491.67, 671.67],
    Scale.REAUMUR: [-218.52, 0.0, 80.0],
    Scale.DELISLE: [559.725, 150.0, 0.0, -30.0],
}


def _pair_id(pair: tuple[Scale, Scale]) -> str:
    return f"{pair[0].value}->{pair[1].value}"


# =============================================================================
# ТОЖДЕСТВЕННОСТЬ
# =============================================================================


class TestIdentityConversion:
    """Инвариант: конверсия в собственную шкалу — тождество"""

    @pytest.mark.parametrize("scale", list(Scale))
    def test_identity_is_exact(self, scale: Scale) -> None:
        """S(x).to_S() возвращает тот же экземпляр с тем же значением"""
        for x in SAMPLES[scale]:
            temp = new_temperature(x, scale)
            same = convert(temp, scale)
            assert same is temp
            assert same.value == x


# =============================================================================
# МАРШРУТИЗАЦИЯ ЧЕРЕЗ ЦЕЛЬСИЙ
# =============================================================================


class TestHubConsistency:
    """Инвариант: непрямые пары считаются строго через Цельсий"""

    def test_pair_sets_partition_all_pairs(self) -> None:
        """30 упорядоченных пар = 15 прямых + 15 через Цельсий"""
        assert len(ALL_PAIRS) == 30
        assert len(DIRECT_PAIRS) == 15
        assert len(HUB_PAIRS) == 15

    @pytest.mark.parametrize("pair", HUB_PAIRS, ids=_pair_id)
    def test_hub_pair_equals_two_hops(self, pair: tuple[Scale, Scale]) -> None:
        """A → B совпадает с A → C → B, вычисленным отдельно"""
        source, target = pair
        for x in SAMPLES[source]:
            temp = new_temperature(x, source)
            via_celsius = convert(temp.to_celsius(), target)
            assert convert(temp, target).value == via_celsius.value

    @pytest.mark.parametrize("pair", sorted(DIRECT_PAIRS, key=_pair_id), ids=_pair_id)
    def test_direct_pair_agrees_with_hub(self, pair: tuple[Scale, Scale]) -> None:
        """Прямая формула согласуется с маршрутом через Цельсий"""
        source, target = pair
        for x in SAMPLES[source]:
            temp = new_temperature(x, source)
            via_celsius = convert(temp.to_celsius(), target)
            assert convert(temp, target).value == pytest.approx(via_celsius.value, abs=1e-9)

    @pytest.mark.parametrize("pair", ALL_PAIRS, ids=_pair_id)
    def test_roundtrip_through_other_scale(self, pair: tuple[Scale, Scale]) -> None:
        """A → B → A возвращает исходное значение"""
        source, target = pair
        for x in SAMPLES[source]:
            temp = new_temperature(x, source)
            back = convert(convert(temp, target), source)
            assert back.value == pytest.approx(x, abs=1e-9)


# =============================================================================
# АБСОЛЮТНЫЙ НОЛЬ
# =============================================================================


class TestAbsoluteZeroAgreement:
    """Инвариант: абсолютный ноль — одна физическая точка во всех шкалах"""

    def test_celsius_absolute_zero(self) -> None:
        """-273.15°C в остальных шкалах"""
        c = new_celsius(-273.15)
        assert c.to_fahrenheit().value == pytest.approx(-459.67, abs=EPS_TEMPERATURE_COMPARE)
        assert c.to_kelvin().value == pytest.approx(0.0, abs=EPS_TEMPERATURE_COMPARE)
        assert c.to_rankine().value == pytest.approx(0.0, abs=EPS_TEMPERATURE_COMPARE)
        assert c.to_reaumur().value == pytest.approx(-218.52, abs=EPS_TEMPERATURE_COMPARE)
        assert c.to_delisle().value == pytest.approx(559.725, abs=EPS_TEMPERATURE_COMPARE)

    @pytest.mark.parametrize("pair", ALL_PAIRS, ids=_pair_id)
    def test_every_scale_agrees(self, pair: tuple[Scale, Scale]) -> None:
        """Абсолютный ноль шкалы A переходит в абсолютный ноль шкалы B"""
        source, target = pair
        zero = SCALE_TYPES[source](ABSOLUTE_ZERO[source])
        assert convert(zero, target).value == pytest.approx(
            ABSOLUTE_ZERO[target], abs=EPS_TEMPERATURE_COMPARE
        )


# =============================================================================
# РЕПЕРНЫЕ ТОЧКИ
# =============================================================================


class TestFixedPoints:
    """Тесты реперных точек воды"""

    @pytest.mark.parametrize(
        "celsius, fahrenheit, kelvin, rankine, reaumur, delisle",
        [
            (0.0, "32.00°F", "273.15K", "491.67°R", "0.00°Re", "150.00°De"),
            (100.0, "212.00°F", "373.15K", "671.67°R", "80.00°Re", "0.00°De"),
        ],
    )
    def test_water_points(
        self,
        celsius: float,
        fahrenheit: str,
        kelvin: str,
        rankine: str,
        reaumur: str,
        delisle: str,
    ) -> None:
        """Точки замерзания и кипения в каждой шкале (с форматированием)"""
        c = new_celsius(celsius)
        assert c.to_fahrenheit().format() == fahrenheit
        assert c.to_kelvin().format() == kelvin
        assert c.to_rankine().format() == rankine
        assert c.to_reaumur().format() == reaumur
        assert c.to_delisle().format() == delisle

    def test_body_temperature(self) -> None:
        """36.6°C — типичное значение"""
        c = Celsius(36.6)
        assert c.to_fahrenheit().value == pytest.approx(97.88)
        assert c.to_kelvin().value == pytest.approx(309.75)
        assert c.to_delisle().value == pytest.approx(95.1)


# =============================================================================
# ГРАНИЦЫ ВАЛИДАЦИИ
# =============================================================================


class TestBoundaryValidation:
    """Тесты границ абсолютного нуля для всех конструкторов"""

    @pytest.mark.parametrize(
        "constructor, at_zero, beyond_zero",
        [
            (new_celsius, -273.15, -274.15),
            (new_fahrenheit, -459.67, -460.67),
            (new_kelvin, 0.0, -1.0),
            (new_rankine, 0.0, -1.0),
            (new_reaumur, -218.52, -219.52),
            (new_delisle, 559.725, 560.725),
        ],
        ids=["celsius", "fahrenheit", "kelvin", "rankine", "reaumur", "delisle"],
    )
    def test_boundary(self, constructor, at_zero: float, beyond_zero: float) -> None:
        """Ровно абсолютный ноль допустим, на единицу за ним — ошибка"""
        assert constructor(at_zero).value == at_zero

        with pytest.raises(BelowAbsoluteZero):
            constructor(beyond_zero)

    @pytest.mark.parametrize(
        "constructor, value",
        [
            (new_celsius, -274.0),
            (new_fahrenheit, -460.0),
            (new_kelvin, -1.0),
            (new_rankine, -1.0),
            (new_reaumur, -219.0),
            (new_delisle, 560.0),
        ],
        ids=["celsius", "fahrenheit", "kelvin", "rankine", "reaumur", "delisle"],
    )
    def test_invalid_values(self, constructor, value: float) -> None:
        """Физически невозможные значения отклоняются"""
        with pytest.raises(BelowAbsoluteZero):
            constructor(value)

    def test_delisle_inverted_both_directions(self) -> None:
        """Делиль: ниже 559.725 допустимо, выше — нет"""
        assert new_delisle(558.725).value == 558.725
        assert new_delisle(0.0).value == 0.0
        assert new_delisle(-560.0).value == -560.0

        with pytest.raises(BelowAbsoluteZero):
            new_delisle(559.726)

    def test_converted_values_stay_valid(self) -> None:
        """Значения внутри диапазона остаются валидными после конверсии"""
        for source, target in ALL_PAIRS:
            for x in SAMPLES[source][1:]:
                converted = convert(new_temperature(x, source), target)
                new_temperature(converted.value, target)  # Не должно быть исключений
