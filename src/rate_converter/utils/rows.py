"""Reusable helpers for rendering rate rows as an aligned table."""

from __future__ import annotations

from typing import Sequence

from rate_converter.models import DISPLAY_PRECISION, RateRow


def format_value(value: float, precision: int = DISPLAY_PRECISION) -> str:
    """Return ``value`` with a fixed number of decimals."""
    return f"{value:.{precision}f}"


def render_rows(rows: Sequence[RateRow], precision: int = DISPLAY_PRECISION) -> list[str]:
    """Render rows so that every decimal point and unit column lines up."""
    if not rows:
        return []
    numbers = [format_value(row.value, precision) for row in rows]
    integer_width = max(len(number.partition(".")[0]) for number in numbers)
    number_width = integer_width + (precision + 1 if precision > 0 else 0)
    unit_width = max(len(row.unit.name) for row in rows)

    return [
        f"{number:>{number_width}} {row.unit.name:>{unit_width}} / {row.period.label}"
        for number, row in zip(numbers, rows)
    ]
