"""
Тесты для слоя отображения (formatting)

Проверяет:
1. Cartesian/polar строки с полной точностью
2. Pretty-отчёт с усечёнными значениями и √(m²)
3. FormatConfig
"""

import pytest

from src.complexible.domain import Angle, ComplexNumber
from src.complexible.presentation import (
    FormatConfig,
    format_cartesian,
    format_polar,
    format_report,
)


@pytest.fixture
def z() -> ComplexNumber:
    return ComplexNumber.from_cartesian(3.0, 4.0)


class TestFormatCartesian:
    def test_full_precision(self, z: ComplexNumber) -> None:
        assert format_cartesian(z) == "cartesian form: 3.0 + 4.0 j"

    def test_raw_values_not_rounded(self) -> None:
        """Отображаются сырые значения"""
        w = ComplexNumber.from_polar(1.0, Angle.from_degrees(45.0))
        assert repr(w.real()) in format_cartesian(w)


class TestFormatPolar:
    def test_two_lines(self, z: ComplexNumber) -> None:
        """Радианы и градусы на отдельных строках"""
        lines = format_polar(z).splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("polar form (radian): 5.0 e ^ ")
        assert lines[1].startswith("polar form (degree): 5.0 e ^ ")
        assert lines[1].endswith("° j")


class TestFormatReport:
    """Тесты для format_report"""

    def test_pretty_values(self, z: ComplexNumber) -> None:
        report = format_report(z)
        assert "Cartesian Form (Pretty): 3.0 + 4.0 j" in report
        assert "Polar Form (Pretty): √25 e ^ 0.9㎭ j" in report
        assert "Polar Form (Pretty): √25 e ^ 53.1° j" in report

    def test_precision_values(self, z: ComplexNumber) -> None:
        report = format_report(z)
        assert "Precision Values:" in report
        assert f"Polar Form (Precision): 5.0 e ^ {z.angle_in_degs()!r}° j" in report

    def test_custom_pretty_places(self, z: ComplexNumber) -> None:
        """pretty_places задаёт число знаков"""
        report = format_report(z, FormatConfig(pretty_places=3))
        assert "Cartesian Form (Pretty): 3.000 + 4.000 j" in report
        assert "53.130°" in report

    def test_str_is_report(self, z: ComplexNumber) -> None:
        """str(ComplexNumber) == format_report"""
        assert str(z) == format_report(z)

    def test_negative_places_rejected(self) -> None:
        with pytest.raises(ValueError, match="pretty_places must be non-negative"):
            FormatConfig(pretty_places=-1)
