"""
Angle — Двойное представление угла (градусы + радианы)

Immutable Pydantic модели:
- Degree / Radian — обёртки над значением в одной единице с конвертером в другую
- Angle — угол, хранящий ОБА значения одновременно

КРИТИЧЕСКИЙ ИНВАРИАНТ:
    radians = degrees × (π/180) и degrees = radians × (180/π)
    Вторая единица всегда выводится из первой в момент создания и
    никогда не обновляется независимо.
"""

import math
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

DEGREES_TO_RADIANS: Final[float] = math.pi / 180.0
RADIANS_TO_DEGREES: Final[float] = 180.0 / math.pi

# Толерантность согласованности, если Angle создаётся сразу из обеих единиц
# (например, повторная валидация model_dump())
ANGLE_CONSISTENCY_REL_TOL: Final[float] = 1e-12
ANGLE_CONSISTENCY_ABS_TOL: Final[float] = 1e-12


# =============================================================================
# UNIT WRAPPERS
# =============================================================================


class Radian(BaseModel):
    """Значение угла в радианах"""

    value: float = Field(..., description="Угол в радианах")

    model_config = {"frozen": True}

    def to_degrees(self) -> "Degree":
        return radians_to_degrees(self.value)


class Degree(BaseModel):
    """Значение угла в градусах"""

    value: float = Field(..., description="Угол в градусах")

    model_config = {"frozen": True}

    def to_radians(self) -> Radian:
        return degrees_to_radians(self.value)


def degrees_to_radians(d: float) -> Radian:
    """
    Конверсия: градусы → радианы

    radians = d × (π/180). NaN/Inf пропагируют.
    """
    return Radian(value=d * DEGREES_TO_RADIANS)


def radians_to_degrees(r: float) -> Degree:
    """
    Конверсия: радианы → градусы

    degrees = r × (180/π). NaN/Inf пропагируют.
    """
    return Degree(value=r * RADIANS_TO_DEGREES)


# =============================================================================
# ANGLE MODEL
# =============================================================================


class Angle(BaseModel):
    """
    Угол, хранимый одновременно в градусах и радианах.

    Immutable модель (frozen=True). Создаётся из ОДНОЙ единицы:

        Angle.from_degrees(45.0)
        Angle.from_radians(math.pi / 4)
        Angle(degrees=45.0)

    Вторая единица выводится model_validator до появления экземпляра,
    поэтому несогласованный Angle наблюдать невозможно.
    """

    degrees: float = Field(..., description="Угол в градусах")
    radians: float = Field(..., description="Угол в радианах")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def derive_missing_unit(cls, data: Any) -> Any:
        """
        Вывод второй единицы из первой.

        Если переданы обе единицы, они обязаны совпадать с учётом
        ANGLE_CONSISTENCY_*_TOL; хранятся градусы, радианы выводятся из них
        заново (как в clone).
        """
        if not isinstance(data, dict):
            return data

        has_degrees = data.get("degrees") is not None
        has_radians = data.get("radians") is not None

        if not has_degrees and not has_radians:
            raise ValueError("Angle requires degrees or radians")

        if has_degrees and not has_radians:
            d = Degree(value=data["degrees"])
            return {**data, "degrees": d.value, "radians": d.to_radians().value}

        if has_radians and not has_degrees:
            r = Radian(value=data["radians"])
            return {**data, "degrees": r.to_degrees().value, "radians": r.value}

        d = Degree(value=data["degrees"])
        r = Radian(value=data["radians"])
        expected = d.to_radians().value
        if not _units_agree(expected, r.value):
            raise ValueError(
                f"Angle units disagree: degrees={d.value} implies radians={expected}, "
                f"got radians={r.value}"
            )
        return {**data, "degrees": d.value, "radians": expected}

    @classmethod
    def from_degrees(cls, d: float) -> "Angle":
        """Угол из градусов; радианы выводятся как d × π/180"""
        return cls(degrees=d)

    @classmethod
    def from_radians(cls, r: float) -> "Angle":
        """Угол из радиан; градусы выводятся как r × 180/π"""
        return cls(radians=r)

    def clone(self) -> "Angle":
        """
        Копия угла.

        Сохраняет значение в градусах и заново выводит радианы
        (round-trip через конверсию, а не копирование поля).
        """
        return Angle.from_degrees(self.degrees)


def _units_agree(expected: float, actual: float) -> bool:
    if math.isnan(expected) and math.isnan(actual):
        return True
    return math.isclose(
        expected,
        actual,
        rel_tol=ANGLE_CONSISTENCY_REL_TOL,
        abs_tol=ANGLE_CONSISTENCY_ABS_TOL,
    )
