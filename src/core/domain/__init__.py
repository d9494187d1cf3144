"""
Domain models and value objects.

Contains temperature scales, their value models and the conversion table.
"""

from src.core.domain.temperature import (
    SCALE_TYPES,
    Celsius,
    Delisle,
    Fahrenheit,
    Kelvin,
    Rankine,
    Reaumur,
    Temperature,
    compare_temperatures,
    convert,
    is_equivalent,
    new_celsius,
    new_delisle,
    new_fahrenheit,
    new_kelvin,
    new_rankine,
    new_reaumur,
    new_temperature,
)
from src.core.domain.units import (
    ABSOLUTE_ZERO,
    ABSOLUTE_ZERO_C,
    ABSOLUTE_ZERO_DE,
    ABSOLUTE_ZERO_F,
    ABSOLUTE_ZERO_K,
    ABSOLUTE_ZERO_R,
    ABSOLUTE_ZERO_RE,
    SCALE_SYMBOLS,
    BelowAbsoluteZero,
    Scale,
    is_inverted,
    validate_temperature,
)

__all__ = [
    # Units module
    "Scale",
    "SCALE_SYMBOLS",
    "ABSOLUTE_ZERO",
    "ABSOLUTE_ZERO_C",
    "ABSOLUTE_ZERO_F",
    "ABSOLUTE_ZERO_K",
    "ABSOLUTE_ZERO_R",
    "ABSOLUTE_ZERO_RE",
    "ABSOLUTE_ZERO_DE",
    "BelowAbsoluteZero",
    "is_inverted",
    "validate_temperature",
    # Temperature models
    "Temperature",
    "Celsius",
    "Fahrenheit",
    "Kelvin",
    "Rankine",
    "Reaumur",
    "Delisle",
    "SCALE_TYPES",
    # Validated constructors
    "new_celsius",
    "new_fahrenheit",
    "new_kelvin",
    "new_rankine",
    "new_reaumur",
    "new_delisle",
    "new_temperature",
    # Generic operations
    "convert",
    "is_equivalent",
    "compare_temperatures",
]
