"""
Coordinates — Cartesian и Polar формы комплексного числа

Immutable Pydantic модели двух представлений одной точки комплексной плоскости
и взаимные конверсии между ними.

ИНВАРИАНТЫ КОНВЕРСИИ (с точностью до округления float):
    magnitude = sqrt(real² + imaginary²)
    angle.radians = atan2(imaginary, real)
    real = magnitude × cos(angle.radians)
    imaginary = magnitude × sin(angle.radians)

Конверсии не делают special-case для нулевой magnitude или нулевых компонент.
"""

import math

from pydantic import BaseModel, Field

from src.complexible.domain.angle import Angle
from src.complexible.math.numerical_safeguards import (
    PI,
    ieee_cos,
    ieee_sin,
    wrap_radians,
)


class CartesianComplex(BaseModel):
    """Комплексное число в форме (real, imaginary)"""

    real: float = Field(..., description="Действительная часть")
    imaginary: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}

    def to_polar(self) -> "PolarComplex":
        """
        Конверсия в полярную форму.

        magnitude — евклидова норма (math.hypot, без переполнения на больших
        компонентах); угол — atan2(imaginary, real) в диапазоне (-π, π],
        корректно для всех четырёх квадрантов и границы real = 0.
        """
        magnitude = math.hypot(self.real, self.imaginary)
        # atan2(-0.0, x<0) = -π; главная ветвь требует +π
        angle = Angle.from_radians(wrap_radians(math.atan2(self.imaginary, self.real)))
        return PolarComplex(magnitude=magnitude, angle=angle)


class PolarComplex(BaseModel):
    """Комплексное число в форме (magnitude, angle)"""

    # magnitude >= 0 по соглашению, НЕ проверяется (ln() даёт отрицательные значения)
    magnitude: float = Field(..., description="Модуль (расстояние до начала координат)")
    angle: Angle = Field(..., description="Направление (аргумент)")

    model_config = {"frozen": True}

    def to_cartesian(self) -> CartesianComplex:
        """Конверсия в декартову форму: (m·cos θ, m·sin θ)"""
        r = self.angle.radians
        return CartesianComplex(
            real=self.magnitude * ieee_cos(r),
            imaginary=self.magnitude * ieee_sin(r),
        )

    def principal(self) -> "PolarComplex":
        """
        Та же точка с углом в главной ветви (-π, π].

        Возвращает self, если угол уже в диапазоне (или не конечен).
        """
        r = self.angle.radians
        if not math.isfinite(r) or -PI < r <= PI:
            return self
        return PolarComplex(
            magnitude=self.magnitude,
            angle=Angle.from_radians(wrap_radians(r)),
        )
