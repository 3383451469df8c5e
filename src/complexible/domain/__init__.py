"""
Domain models and value objects.

Contains the dual-representation value types: Angle, CartesianComplex,
PolarComplex, ComplexNumber, and the approximate equality comparator.
"""

from src.complexible.domain.angle import (
    Angle,
    Degree,
    Radian,
    degrees_to_radians,
    radians_to_degrees,
)
from src.complexible.domain.complex_number import ComplexNumber
from src.complexible.domain.coordinates import CartesianComplex, PolarComplex
from src.complexible.domain.equality import (
    EQUALITY_DECIMAL_PLACES,
    ComplexComparator,
    EqualityConfig,
    approx_equal,
)

__all__ = [
    # Angle
    "Angle",
    "Degree",
    "Radian",
    "degrees_to_radians",
    "radians_to_degrees",
    # Coordinates
    "CartesianComplex",
    "PolarComplex",
    # ComplexNumber
    "ComplexNumber",
    # Equality
    "EQUALITY_DECIMAL_PLACES",
    "ComplexComparator",
    "EqualityConfig",
    "approx_equal",
]
