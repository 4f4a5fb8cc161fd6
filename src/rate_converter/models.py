"""Shared value objects and unit tables used across the converter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DISPLAY_PRECISION = 3


class UnitSystem(Enum):
    """Step between two consecutive byte units."""

    DECIMAL = 1000
    BINARY = 1024

    @property
    def base(self) -> int:
        return self.value


class ByteUnit(Enum):
    """Byte multiples from plain bytes up to yottabytes."""

    B = 0
    KB = 1
    MB = 2
    GB = 3
    TB = 4
    PB = 5
    EB = 6
    ZB = 7
    YB = 8

    @property
    def exponent(self) -> int:
        return self.value

    def multiplier(self, system: UnitSystem = UnitSystem.DECIMAL) -> int:
        """Return how many bytes one of this unit holds under ``system``."""
        return system.base ** self.exponent

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(unit.name for unit in cls)


class Period(Enum):
    """Time spans a rate can be expressed over, with their accepted spellings."""

    SEC = (1, "sec", ("s", "sec", "second"))
    MIN = (60, "min", ("m", "min", "minute"))
    HOUR = (60 * 60, "hour", ("h", "hr", "hour"))
    DAY = (24 * 60 * 60, "day", ("d", "day"))
    WEEK = (7 * 24 * 60 * 60, "week", ("w", "wk", "week"))
    MONTH = (30 * 24 * 60 * 60, "month", ("mon", "month"))
    YEAR = (365 * 24 * 60 * 60, "year", ("y", "yr", "year"))

    def __init__(self, seconds: int, label: str, spellings: tuple[str, ...]) -> None:
        self.seconds = seconds
        self.label = label
        self.spellings = spellings

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(period.label for period in cls)


@dataclass(frozen=True)
class RateRequest:
    """Parsed user input: ``amount`` of ``unit`` every ``period``."""

    amount: float
    unit: ByteUnit
    period: Period


@dataclass(frozen=True)
class RateRow:
    """A single table line, already scaled to its best-fit unit."""

    value: float
    unit: ByteUnit
    period: Period


@dataclass(frozen=True)
class ConverterOptions:  # pylint: disable=too-few-public-methods
    """Runtime settings collected from the command line."""

    unit_system: UnitSystem = UnitSystem.DECIMAL
    precision: int = DISPLAY_PRECISION
