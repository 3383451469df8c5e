"""
Equality — Приближённое структурное сравнение комплексных чисел

Два ComplexNumber равны тогда и только тогда, когда равны все пять производных
скаляров после независимого округления каждого до фиксированного числа
десятичных знаков:

    magnitude, angle (degrees), angle (radians), real, imaginary

Это практическое сравнение значений, полученных разными путями (Cartesian vs
Polar), которые математически идентичны, но расходятся в последних битах из-за
тригонометрического round-trip.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from src.complexible.math.numerical_safeguards import round_to_places

if TYPE_CHECKING:
    from src.complexible.domain.complex_number import ComplexNumber


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Число десятичных знаков для сравнения (round half away from zero)
EQUALITY_DECIMAL_PLACES: Final[int] = 5


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EqualityConfig:
    """Конфигурация сравнения.

    decimal_places — число знаков после запятой, до которого округляется
    каждый скаляр перед сравнением.
    """

    decimal_places: int = EQUALITY_DECIMAL_PLACES

    def __post_init__(self) -> None:
        if self.decimal_places < 0:
            raise ValueError(
                f"decimal_places must be non-negative, got {self.decimal_places}"
            )


# =============================================================================
# COMPARATOR
# =============================================================================


class ComplexComparator:
    """Сравнение ComplexNumber с округлением до decimal_places знаков.

    NaN не равен ничему (в том числе самому себе) — как в IEEE-754.
    """

    def __init__(self, config: EqualityConfig | None = None):
        """Инициализация компаратора.

        Args:
            config: конфигурация сравнения (опционально, используется default)
        """
        self.config = config or EqualityConfig()

    def key(self, z: "ComplexNumber") -> tuple[float, float, float, float, float]:
        """Округлённые (magnitude, degrees, radians, imag, real)."""
        places = self.config.decimal_places
        return (
            round_to_places(z.abs(), places),
            round_to_places(z.angle_in_degs(), places),
            round_to_places(z.angle_in_rads(), places),
            round_to_places(z.imag(), places),
            round_to_places(z.real(), places),
        )

    def equals(self, z1: "ComplexNumber", z2: "ComplexNumber") -> bool:
        """Поэлементное сравнение ключей (NaN != NaN)."""
        return all(a == b for a, b in zip(self.key(z1), self.key(z2)))


# Компаратор по умолчанию, используется ComplexNumber.__eq__ / __hash__
DEFAULT_COMPARATOR: Final[ComplexComparator] = ComplexComparator()


def approx_equal(
    z1: "ComplexNumber",
    z2: "ComplexNumber",
    decimal_places: int = EQUALITY_DECIMAL_PLACES,
) -> bool:
    """
    Сравнение двух ComplexNumber с заданной толерантностью.

    Args:
        z1: Первое число
        z2: Второе число
        decimal_places: Число десятичных знаков (default: EQUALITY_DECIMAL_PLACES)

    Returns:
        True если все пять скаляров совпадают после округления

    Examples:
        >>> approx_equal(ComplexNumber.from_real(1.0), ComplexNumber.from_real(1.000001))
        True
        >>> approx_equal(ComplexNumber.from_real(1.0), ComplexNumber.from_real(1.001), 2)
        True
    """
    return ComplexComparator(EqualityConfig(decimal_places=decimal_places)).equals(z1, z2)
