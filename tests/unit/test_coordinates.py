"""
Тесты для CartesianComplex / PolarComplex

Проверяет:
1. Cartesian → Polar (евклидова норма, atan2 во всех квадрантах)
2. Polar → Cartesian
3. Round-trip инвариант конверсий
4. Нормализацию угла в главную ветвь (principal)
"""

import math

import pytest
from pydantic import ValidationError

from src.complexible.domain.angle import Angle
from src.complexible.domain.coordinates import CartesianComplex, PolarComplex


class TestCartesianToPolar:
    """Тесты CartesianComplex.to_polar()"""

    def test_three_four_five(self) -> None:
        """(3, 4) → magnitude 5"""
        polar = CartesianComplex(real=3.0, imaginary=4.0).to_polar()
        assert polar.magnitude == 5.0
        assert polar.angle.radians == math.atan2(4.0, 3.0)

    @pytest.mark.parametrize(
        "real, imaginary, expected_degrees",
        [
            (1.0, 1.0, 45.0),
            (-1.0, 1.0, 135.0),
            (-1.0, -1.0, -135.0),
            (1.0, -1.0, -45.0),
            (0.0, 1.0, 90.0),
            (0.0, -1.0, -90.0),
            (-1.0, 0.0, 180.0),
            (1.0, 0.0, 0.0),
        ],
    )
    def test_quadrants(self, real: float, imaginary: float, expected_degrees: float) -> None:
        """atan2 корректен во всех квадрантах и на осях"""
        polar = CartesianComplex(real=real, imaginary=imaginary).to_polar()
        assert polar.angle.degrees == pytest.approx(expected_degrees)
        assert -math.pi < polar.angle.radians <= math.pi

    @pytest.mark.parametrize("real", [-1.0, -2.5, -1e-300])
    def test_negative_zero_imaginary_is_plus_pi(self, real: float) -> None:
        """(x<0, -0.0): atan2 даёт -π, угол нормализуется в +π"""
        polar = CartesianComplex(real=real, imaginary=-0.0).to_polar()
        assert polar.angle.radians == math.pi
        assert polar.angle.degrees == 180.0
        assert -math.pi < polar.angle.radians <= math.pi

    def test_origin(self) -> None:
        """(0, 0) → magnitude 0, angle 0 (без special-case)"""
        polar = CartesianComplex(real=0.0, imaginary=0.0).to_polar()
        assert polar.magnitude == 0.0
        assert polar.angle.radians == 0.0

    def test_large_components_do_not_overflow(self) -> None:
        """Евклидова норма без переполнения"""
        polar = CartesianComplex(real=1e200, imaginary=1e200).to_polar()
        assert polar.magnitude == pytest.approx(math.sqrt(2) * 1e200)


class TestPolarToCartesian:
    """Тесты PolarComplex.to_cartesian()"""

    def test_unit_45_degrees(self) -> None:
        """(1, 45°) → (√2/2, √2/2)"""
        cart = PolarComplex(magnitude=1.0, angle=Angle.from_degrees(45.0)).to_cartesian()
        assert cart.real == pytest.approx(0.7071067811865476)
        assert cart.imaginary == pytest.approx(0.7071067811865476)

    def test_formula(self) -> None:
        """real = m·cos θ, imaginary = m·sin θ"""
        angle = Angle.from_radians(2.0)
        cart = PolarComplex(magnitude=3.0, angle=angle).to_cartesian()
        assert cart.real == 3.0 * math.cos(2.0)
        assert cart.imaginary == 3.0 * math.sin(2.0)

    def test_negative_magnitude_not_rejected(self) -> None:
        """magnitude >= 0 — соглашение, не проверка"""
        cart = PolarComplex(magnitude=-2.0, angle=Angle.from_degrees(0.0)).to_cartesian()
        assert cart.real == -2.0

    def test_infinite_angle_gives_nan(self) -> None:
        """cos/sin(inf) → NaN без исключения"""
        cart = PolarComplex(magnitude=1.0, angle=Angle.from_radians(math.inf)).to_cartesian()
        assert math.isnan(cart.real)
        assert math.isnan(cart.imaginary)


class TestRoundTrip:
    """Инвариант: Cartesian → Polar → Cartesian"""

    @pytest.mark.parametrize(
        "real, imaginary",
        [
            (1.0, 1.0),
            (2.0, 3.0),
            (-4.5, 0.25),
            (-0.001, -1000.0),
            (123.456, -7.89),
            (0.0, 5.0),
            (-3.0, 0.0),
        ],
    )
    def test_roundtrip(self, real: float, imaginary: float) -> None:
        """to_polar().to_cartesian() воспроизводит исходные координаты"""
        back = CartesianComplex(real=real, imaginary=imaginary).to_polar().to_cartesian()
        assert back.real == pytest.approx(real, abs=1e-9)
        assert back.imaginary == pytest.approx(imaginary, abs=1e-9)


class TestPrincipal:
    """Тесты PolarComplex.principal()"""

    def test_in_range_returns_self(self) -> None:
        """Угол в (-π, π] → тот же объект"""
        polar = PolarComplex(magnitude=1.0, angle=Angle.from_degrees(170.0))
        assert polar.principal() is polar

    def test_wraps_above_180(self) -> None:
        """240° → -120°"""
        polar = PolarComplex(magnitude=2.0, angle=Angle.from_degrees(240.0)).principal()
        assert polar.magnitude == 2.0
        assert polar.angle.degrees == pytest.approx(-120.0)

    def test_wraps_below_minus_180(self) -> None:
        """-270° → 90°"""
        polar = PolarComplex(magnitude=1.0, angle=Angle.from_degrees(-270.0)).principal()
        assert polar.angle.degrees == pytest.approx(90.0)

    def test_same_point(self) -> None:
        """Нормализация не меняет точку"""
        raw = PolarComplex(magnitude=3.0, angle=Angle.from_degrees(400.0))
        wrapped = raw.principal()
        a = raw.to_cartesian()
        b = wrapped.to_cartesian()
        assert a.real == pytest.approx(b.real, abs=1e-12)
        assert a.imaginary == pytest.approx(b.imaginary, abs=1e-12)


class TestImmutability:
    """Immutability (frozen=True)"""

    def test_cartesian_frozen(self) -> None:
        c = CartesianComplex(real=1.0, imaginary=2.0)
        with pytest.raises(ValidationError):
            c.real = 5.0  # type: ignore[misc]

    def test_polar_frozen(self) -> None:
        p = PolarComplex(magnitude=1.0, angle=Angle.from_degrees(0.0))
        with pytest.raises(ValidationError):
            p.magnitude = 5.0  # type: ignore[misc]
