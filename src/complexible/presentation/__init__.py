"""
Presentation — текстовое отображение комплексных чисел.
"""

from src.complexible.presentation.formatting import (
    PRETTY_DECIMAL_PLACES,
    FormatConfig,
    format_cartesian,
    format_polar,
    format_report,
)

__all__ = [
    "PRETTY_DECIMAL_PLACES",
    "FormatConfig",
    "format_cartesian",
    "format_polar",
    "format_report",
]
