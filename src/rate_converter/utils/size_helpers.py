"""Helpers for working with byte sizes."""

from __future__ import annotations

from dataclasses import dataclass

from rate_converter.models import ByteUnit, UnitSystem


@dataclass(frozen=True)
class SizeValue:
    """Represents a human-friendly size and provides conversion helpers."""

    amount: float
    unit: ByteUnit

    def to_bytes(self, system: UnitSystem = UnitSystem.DECIMAL) -> float:
        """Convert the human-friendly size into raw bytes."""
        return self.amount * self.unit.multiplier(system)


def scale_bytes(byte_count: float, system: UnitSystem = UnitSystem.DECIMAL) -> SizeValue:
    """Express ``byte_count`` in the largest unit that keeps the amount at or above one.

    Amounts below one byte stay in bytes, and amounts past the last unit stay
    in yottabytes without further scaling.
    """
    if byte_count < 0:
        raise ValueError("byte_count must be non-negative")
    scaled_unit = ByteUnit.B
    for unit in ByteUnit:
        if byte_count / unit.multiplier(system) >= 1:
            scaled_unit = unit
    return SizeValue(byte_count / scaled_unit.multiplier(system), scaled_unit)
