"""
Formatting — Текстовое представление ComplexNumber

Тонкий слой отображения поверх accessor-методов ComplexNumber. Ядро отдаёт
сырые (неокруглённые) значения; все решения об округлении при отображении
принимаются здесь.

Формы:
- Pretty: усечённые значения (PRETTY_DECIMAL_PLACES знаков), magnitude как √(m²)
- Precision: полные значения float (repr)
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from src.complexible.domain.complex_number import ComplexNumber


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

PRETTY_DECIMAL_PLACES: Final[int] = 1

RADIAN_SIGN: Final[str] = "㎭"
DEGREE_SIGN: Final[str] = "°"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация отображения.

    pretty_places — знаков после запятой для real/imag/angle в pretty-форме.
    """

    pretty_places: int = PRETTY_DECIMAL_PLACES

    def __post_init__(self) -> None:
        if self.pretty_places < 0:
            raise ValueError(
                f"pretty_places must be non-negative, got {self.pretty_places}"
            )


# =============================================================================
# FORMATTERS
# =============================================================================


def format_cartesian(z: "ComplexNumber") -> str:
    """'cartesian form: {re} + {im} j' с полной точностью"""
    return f"cartesian form: {z.real()!r} + {z.imag()!r} j"


def format_polar(z: "ComplexNumber") -> str:
    """Полярная форма в радианах и градусах (две строки) с полной точностью"""
    return (
        f"polar form (radian): {z.abs()!r} e ^ {z.angle_in_rads()!r}{RADIAN_SIGN} j\n"
        f"polar form (degree): {z.abs()!r} e ^ {z.angle_in_degs()!r}{DEGREE_SIGN} j"
    )


def format_report(z: "ComplexNumber", config: FormatConfig | None = None) -> str:
    """
    Полный отчёт: pretty-значения и precision-значения.

    В pretty-форме magnitude выводится как √(m²) без знаков после запятой,
    real/imag/angle — с config.pretty_places знаками.

    Args:
        z: Число для отображения
        config: конфигурация отображения (опционально, используется default)

    Returns:
        Многострочный отчёт
    """
    config = config or FormatConfig()
    p = config.pretty_places
    mag_squared = z.abs() * z.abs()

    lines = [
        "Pretty Values:",
        f"Cartesian Form (Pretty): {z.real():.{p}f} + {z.imag():.{p}f} j",
        f"Polar Form (Pretty): √{mag_squared:.0f} e ^ {z.angle_in_rads():.{p}f}{RADIAN_SIGN} j",
        f"Polar Form (Pretty): √{mag_squared:.0f} e ^ {z.angle_in_degs():.{p}f}{DEGREE_SIGN} j",
        "",
        "Precision Values:",
        f"Cartesian Form (Precision): {z.real()!r} + {z.imag()!r} j",
        f"Polar Form (Precision): {z.abs()!r} e ^ {z.angle_in_rads()!r}{RADIAN_SIGN} j",
        f"Polar Form (Precision): {z.abs()!r} e ^ {z.angle_in_degs()!r}{DEGREE_SIGN} j",
    ]
    return "\n".join(lines)
