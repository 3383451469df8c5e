"""
ComplexNumber — Комплексное число в двух синхронизированных представлениях

Immutable Pydantic модель, владеющая одной CartesianComplex и одной PolarComplex.

ЦЕНТРАЛЬНЫЙ ИНВАРИАНТ:
    cartesian и polar ВСЕГДА описывают одну и ту же точку.
    Недостающее представление выводится model_validator в момент создания;
    мутаторов нет, каждая операция возвращает новый экземпляр.

ВЫБОР ПРЕДСТАВЛЕНИЯ ДЛЯ ОПЕРАЦИЙ:
    add / sub / conjugate           → Cartesian
    mul / div / pow / nth_root      → Polar
    mul_scalar / ln / log10 / log   → Polar

Polar-значения хранятся в главной ветви: угол вне (-π, π] (например θ·n после
pow) нормализуется до вывода Cartesian-формы.

Все операции тотальны над IEEE-754 float: деление на нулевую magnitude, ln(0)
и т.п. дают inf/NaN, которые пропагируют дальше, а не исключение.
"""

import logging
import math
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from src.complexible.domain.angle import Angle
from src.complexible.domain.coordinates import CartesianComplex, PolarComplex
from src.complexible.domain.equality import DEFAULT_COMPARATOR
from src.complexible.math.numerical_safeguards import (
    ieee_divide,
    ieee_log,
    ieee_log10,
    ieee_log_base,
    ieee_pow,
    is_valid_float,
)
from src.complexible.presentation.formatting import format_report

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Допуск согласованности cartesian/polar при передаче обеих форм.
# Абсолютная часть масштабируется по |magnitude|: компонента около нуля
# у большого числа несёт погрешность порядка ulp(magnitude).
REPRESENTATION_CONSISTENCY_REL_TOL: Final[float] = 1e-9
REPRESENTATION_CONSISTENCY_ABS_TOL: Final[float] = 1e-12


class ComplexNumber(BaseModel):
    """
    Комплексное число (Cartesian + Polar).

    Immutable модель (frozen=True). Создание:

        ComplexNumber.from_cartesian(3.0, 4.0)
        ComplexNumber.from_polar(5.0, Angle.from_degrees(53.13))
        ComplexNumber.from_real(1.0)

    Прямой вызов ComplexNumber(cartesian=...) или ComplexNumber(polar=...)
    тоже допустим; если переданы обе формы, они обязаны описывать одну точку.

    Equality — приближённая (см. src.complexible.domain.equality).
    """

    cartesian: CartesianComplex = Field(..., description="Декартова форма (real, imaginary)")
    polar: PolarComplex = Field(..., description="Полярная форма (magnitude, angle)")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def derive_missing_representation(cls, data: Any) -> Any:
        """
        Вывод недостающего представления.

        - только cartesian → polar = cartesian.to_polar()
        - только polar     → polar в главной ветви, cartesian = polar.to_cartesian()
        - обе формы        → проверка согласованности (math.isclose с
                             REPRESENTATION_CONSISTENCY_*_TOL)
        """
        if not isinstance(data, dict):
            return data

        cartesian = data.get("cartesian")
        polar = data.get("polar")

        if cartesian is None and polar is None:
            raise ValueError("ComplexNumber requires cartesian or polar form")

        if polar is None:
            cartesian = CartesianComplex.model_validate(cartesian)
            polar = cartesian.to_polar()
        elif cartesian is None:
            polar = PolarComplex.model_validate(polar).principal()
            cartesian = polar.to_cartesian()
        else:
            cartesian = CartesianComplex.model_validate(cartesian)
            polar = PolarComplex.model_validate(polar).principal()
            if not _forms_agree(cartesian, polar):
                raise ValueError(
                    f"cartesian ({cartesian.real}, {cartesian.imaginary}) and polar "
                    f"({polar.magnitude}, {polar.angle.degrees}°) describe different points"
                )

        if not _all_finite(cartesian, polar):
            logger.debug(
                "Non-finite complex number: real=%r imag=%r magnitude=%r radians=%r",
                cartesian.real,
                cartesian.imaginary,
                polar.magnitude,
                polar.angle.radians,
            )

        return {**data, "cartesian": cartesian, "polar": polar}

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def from_cartesian(cls, real: float, imaginary: float) -> "ComplexNumber":
        """
        Создание из декартовых координат.

        Args:
            real: Действительная часть
            imaginary: Мнимая часть

        Returns:
            ComplexNumber с выведенной полярной формой
        """
        return cls(cartesian=CartesianComplex(real=real, imaginary=imaginary))

    @classmethod
    def from_polar(cls, magnitude: float, angle: Angle) -> "ComplexNumber":
        """
        Создание из полярных координат.

        Args:
            magnitude: Модуль
            angle: Угол (Angle)

        Returns:
            ComplexNumber с выведенной декартовой формой
        """
        return cls(polar=PolarComplex(magnitude=magnitude, angle=angle))

    @classmethod
    def from_real(cls, real: float) -> "ComplexNumber":
        """Действительное число: from_cartesian(real, 0.0)"""
        return cls.from_cartesian(real, 0.0)

    # =========================================================================
    # ACCESSORS (сырые значения, без округления)
    # =========================================================================

    def real(self) -> float:
        return self.cartesian.real

    def imag(self) -> float:
        return self.cartesian.imaginary

    def abs(self) -> float:
        """Модуль (magnitude)"""
        return self.polar.magnitude

    def angle_in_rads(self) -> float:
        return self.polar.angle.radians

    def angle_in_degs(self) -> float:
        return self.polar.angle.degrees

    def angle_in_angle(self) -> Angle:
        """Копия внутреннего Angle (через Angle.clone())"""
        return self.polar.angle.clone()

    # =========================================================================
    # CARTESIAN OPERATIONS
    # =========================================================================

    def add(self, z2: "ComplexNumber") -> "ComplexNumber":
        """(re1 + re2, im1 + im2)"""
        return ComplexNumber.from_cartesian(self.real() + z2.real(), self.imag() + z2.imag())

    def sub(self, z2: "ComplexNumber") -> "ComplexNumber":
        """(re1 - re2, im1 - im2)"""
        return ComplexNumber.from_cartesian(self.real() - z2.real(), self.imag() - z2.imag())

    def conjugate(self) -> "ComplexNumber":
        """Комплексно-сопряжённое: (re, -im)"""
        return ComplexNumber.from_cartesian(self.real(), -self.imag())

    # =========================================================================
    # POLAR OPERATIONS
    # =========================================================================

    def mul(self, z2: "ComplexNumber") -> "ComplexNumber":
        """
        Произведение: magnitude = m1·m2, angle = θ1 + θ2.

        Examples:
            >>> z1 = ComplexNumber.from_polar(2.0, Angle.from_degrees(30.0))
            >>> z2 = ComplexNumber.from_polar(3.0, Angle.from_degrees(45.0))
            >>> z1.mul(z2) == ComplexNumber.from_polar(6.0, Angle.from_degrees(75.0))
            True
        """
        magnitude = self.abs() * z2.abs()
        angle = Angle.from_radians(self.angle_in_rads() + z2.angle_in_rads())
        return ComplexNumber.from_polar(magnitude, angle)

    def mul_scalar(self, n: float) -> "ComplexNumber":
        """Умножение на скаляр: magnitude = m·n, угол без изменений"""
        return ComplexNumber.from_polar(self.abs() * n, self.angle_in_angle())

    def div(self, z2: "ComplexNumber") -> "ComplexNumber":
        """
        Частное: magnitude = m1/m2, angle = θ1 - θ2.

        Деление на нулевую magnitude даёт inf/NaN (IEEE-754), не исключение.
        """
        magnitude = ieee_divide(self.abs(), z2.abs())
        angle = Angle.from_radians(self.angle_in_rads() - z2.angle_in_rads())
        return ComplexNumber.from_polar(magnitude, angle)

    def pow(self, n: float) -> "ComplexNumber":
        """
        Степень: magnitude = m^n, angle = θ·n.

        Угол θ·n нормализуется в главную ветвь (-π, π] при создании результата.
        """
        magnitude = ieee_pow(self.abs(), n)
        angle = Angle.from_radians(self.angle_in_rads() * n)
        return ComplexNumber.from_polar(magnitude, angle)

    def nth_root(self, n: float) -> "ComplexNumber":
        """
        Главный корень n-й степени: magnitude = m^(1/n), angle = θ/n.

        Вычисляется ТОЛЬКО главный корень. Остальные n-1 корней
        (θ/n + 2πk/n) намеренно не вычисляются.

        Следствие: z.pow(n).nth_root(n) == z только пока θ·n остаётся в
        (-180°, 180°]; иначе результат — другой корень.
        """
        magnitude = ieee_pow(self.abs(), ieee_divide(1.0, n))
        angle = Angle.from_radians(ieee_divide(self.angle_in_rads(), n))
        return ComplexNumber.from_polar(magnitude, angle)

    def ln(self) -> "ComplexNumber":
        """
        "Натуральный логарифм": magnitude = ln(m), угол без изменений.

        ВНИМАНИЕ: это НЕ стандартный комплексный логарифм. Для z = m·e^(iθ)
        стандартный ln(z) = ln(m) + iθ в декартовой форме. Здесь же строится
        новое полярное число (ln(m), θ) и переводится в декартову форму:
        (ln(m)·cos θ, ln(m)·sin θ). Поведение сохранено для совместимости.

        Examples:
            >>> z = ComplexNumber.from_polar(2.0, Angle.from_degrees(30.0)).ln()
            >>> round(z.real(), 6), round(z.imag(), 6)
            (0.600283, 0.346574)
        """
        return ComplexNumber.from_polar(ieee_log(self.abs()), self.angle_in_angle())

    def log10(self) -> "ComplexNumber":
        """magnitude = log10(m), угол без изменений (та же оговорка, что у ln)"""
        return ComplexNumber.from_polar(ieee_log10(self.abs()), self.angle_in_angle())

    def log(self, base: float) -> "ComplexNumber":
        """magnitude = ln(m)/ln(base), угол без изменений (та же оговорка, что у ln)"""
        return ComplexNumber.from_polar(ieee_log_base(self.abs(), base), self.angle_in_angle())

    # =========================================================================
    # EQUALITY
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return DEFAULT_COMPARATOR.equals(self, other)

    def __hash__(self) -> int:
        return hash(DEFAULT_COMPARATOR.key(self))

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other: object) -> "ComplexNumber":
        z = _lift(other)
        if z is None:
            return NotImplemented
        return self.add(z)

    __radd__ = __add__

    def __sub__(self, other: object) -> "ComplexNumber":
        z = _lift(other)
        if z is None:
            return NotImplemented
        return self.sub(z)

    def __rsub__(self, other: object) -> "ComplexNumber":
        z = _lift(other)
        if z is None:
            return NotImplemented
        return z.sub(self)

    def __mul__(self, other: object) -> "ComplexNumber":
        if isinstance(other, ComplexNumber):
            return self.mul(other)
        if _is_real(other):
            return self.mul_scalar(other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "ComplexNumber":
        z = _lift(other)
        if z is None:
            return NotImplemented
        return self.div(z)

    def __rtruediv__(self, other: object) -> "ComplexNumber":
        z = _lift(other)
        if z is None:
            return NotImplemented
        return z.div(self)

    def __pow__(self, n: object) -> "ComplexNumber":
        if not _is_real(n):
            return NotImplemented
        return self.pow(n)

    def __abs__(self) -> float:
        return self.abs()

    def __complex__(self) -> complex:
        return complex(self.real(), self.imag())

    def __str__(self) -> str:
        return format_report(self)


# =============================================================================
# HELPERS
# =============================================================================


def _is_real(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _lift(value: object) -> ComplexNumber | None:
    if isinstance(value, ComplexNumber):
        return value
    if _is_real(value):
        return ComplexNumber.from_real(value)
    return None


def _all_finite(cartesian: CartesianComplex, polar: PolarComplex) -> bool:
    return all(
        is_valid_float(v)
        for v in (cartesian.real, cartesian.imaginary, polar.magnitude, polar.angle.radians)
    )


def _forms_agree(cartesian: CartesianComplex, polar: PolarComplex) -> bool:
    # polar → cartesian определено и для отрицательной magnitude (ln/log);
    # cartesian → polar покрывает inf-magnitude, где inf × sin(0) = NaN
    scale = abs(polar.magnitude) if is_valid_float(polar.magnitude) else 0.0
    abs_tol = REPRESENTATION_CONSISTENCY_REL_TOL * scale + REPRESENTATION_CONSISTENCY_ABS_TOL

    derived = polar.to_cartesian()
    if _components_close(cartesian.real, derived.real, abs_tol) and _components_close(
        cartesian.imaginary, derived.imaginary, abs_tol
    ):
        return True

    reverse = cartesian.to_polar()
    return _components_close(
        polar.magnitude, reverse.magnitude, abs_tol
    ) and _components_close(
        polar.angle.radians, reverse.angle.radians, REPRESENTATION_CONSISTENCY_ABS_TOL
    )


def _components_close(a: float, b: float, abs_tol: float) -> bool:
    if math.isnan(a) and math.isnan(b):
        return True
    return math.isclose(a, b, rel_tol=REPRESENTATION_CONSISTENCY_REL_TOL, abs_tol=abs_tol)
