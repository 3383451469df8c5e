"""
Numerical Safeguards — IEEE-754 Math Primitives

Модуль обеспечивает предсказуемое поведение float-операций для complex-арифметики:
- Деление, логарифмы, степень и тригонометрия с IEEE-754 семантикой
  (math.* бросает ValueError/ZeroDivisionError там, где IEEE даёт inf/NaN)
- Округление до заданного числа десятичных знаков (round half away from zero)
- Нормализация угла в главную ветвь (-π, π]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не бросает исключений для числового входа
2. NaN/Inf пропагируют по правилам IEEE-754 (НЕ заменяются на fallback)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Полный оборот в радианах
TAU: Final[float] = math.tau

# Граница главной ветви угла: (-PI, PI]
PI: Final[float] = math.pi


# =============================================================================
# ВАЛИДНОСТЬ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# IEEE-754 АРИФМЕТИКА
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    Python бросает ZeroDivisionError при делении на 0.0, IEEE-754 даёт:
    - x / ±0 = ±inf (знак = sign(x) * sign(0))
    - 0 / 0 = NaN, NaN / 0 = NaN

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм с IEEE-754 семантикой.

    log(±0) = -inf, log(x < 0) = NaN, log(inf) = inf, log(NaN) = NaN.
    """
    if math.isnan(value):
        return math.nan
    if value == 0.0:
        return -math.inf
    if value < 0.0:
        return math.nan
    return math.log(value)


def ieee_log10(value: float) -> float:
    """Десятичный логарифм с IEEE-754 семантикой (см. ieee_log)."""
    if math.isnan(value):
        return math.nan
    if value == 0.0:
        return -math.inf
    if value < 0.0:
        return math.nan
    return math.log10(value)


def ieee_log_base(value: float, base: float) -> float:
    """
    Логарифм по произвольному основанию: ln(value) / ln(base).

    base = 1 даёт ln(base) = 0 → ±inf или NaN через ieee_divide.
    """
    return ieee_divide(ieee_log(value), ieee_log(base))


def ieee_pow(base: float, exponent: float) -> float:
    """
    Возведение в степень с IEEE-754 семантикой.

    math.pow бросает ValueError для pole/domain ошибок и OverflowError
    при переполнении. IEEE-754:
    - pow(±0, y < 0) = +inf (или ±inf для нечётного целого y)
    - pow(x < 0, нецелый y) = NaN
    - переполнение = ±inf

    Examples:
        >>> ieee_pow(2.0, 3.0)
        8.0
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(-8.0, 1.0 / 3.0)
        nan
    """
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and int(value) % 2 == 1


def ieee_cos(radians: float) -> float:
    """cos с IEEE-754 семантикой: cos(±inf) = NaN вместо ValueError."""
    if math.isinf(radians):
        return math.nan
    return math.cos(radians)


def ieee_sin(radians: float) -> float:
    """sin с IEEE-754 семантикой: sin(±inf) = NaN вместо ValueError."""
    if math.isinf(radians):
        return math.nan
    return math.sin(radians)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to_places(value: float, places: int) -> float:
    """
    Округление до заданного числа десятичных знаков.

    Использует стандартное математическое округление (round half away from zero),
    а НЕ banker's rounding встроенного round().

    Args:
        value: Значение для округления
        places: Число десятичных знаков (>= 0)

    Returns:
        Округлённое значение. NaN/Inf возвращаются без изменений.

    Raises:
        ValueError: Если places < 0

    Examples:
        >>> round_to_places(1.234566, 5)
        1.23457
        >>> round_to_places(-2.5, 0)
        -3.0
        >>> round_to_places(0.125, 2)
        0.13
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    if not is_valid_float(value):
        return value

    scale = 10.0**places
    ratio = value * scale

    # Переполнение при масштабировании: значение уже точнее шага округления
    if not is_valid_float(ratio):
        return value

    if ratio >= 0:
        steps = math.floor(ratio + 0.5)
    else:
        steps = math.ceil(ratio - 0.5)

    return steps / scale


# =============================================================================
# УГЛЫ
# =============================================================================


def wrap_radians(radians: float) -> float:
    """
    Нормализация угла в главную ветвь (-π, π].

    Угол, уже лежащий в диапазоне, возвращается без изменений (бит-в-бит).
    NaN/Inf возвращаются без изменений.

    Examples:
        >>> wrap_radians(0.5)
        0.5
        >>> wrap_radians(-math.pi)
        3.141592653589793
    """
    if not is_valid_float(radians):
        return radians

    if -PI < radians <= PI:
        return radians

    wrapped = math.remainder(radians, TAU)
    if wrapped <= -PI:
        wrapped += TAU
    return wrapped
