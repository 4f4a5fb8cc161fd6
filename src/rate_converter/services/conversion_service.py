"""High level orchestration for rate conversion."""

from __future__ import annotations

import logging
import math

from rate_converter.models import ConverterOptions, Period, RateRequest, RateRow
from rate_converter.services.exceptions import InvalidAmount
from rate_converter.utils.rows import render_rows
from rate_converter.utils.size_helpers import SizeValue, scale_bytes

LOGGER = logging.getLogger(__name__)


class ConversionService:
    """Facade converting a parsed request into the seven-period rate table."""

    def __init__(self, options: ConverterOptions | None = None) -> None:
        self._options = options or ConverterOptions()

    def base_rate(self, request: RateRequest) -> float:
        """Return the canonical rate in bytes per second.

        Every displayed row derives from this single value, so the rows can
        never drift apart from one another.
        """
        total_bytes = SizeValue(request.amount, request.unit).to_bytes(self._options.unit_system)
        bytes_per_second = total_bytes / request.period.seconds
        longest = max(period.seconds for period in Period)
        if not math.isfinite(bytes_per_second * longest):
            raise InvalidAmount(str(request.amount), "number is too large")
        LOGGER.debug(
            "%s %s / %s is %r bytes per second",
            request.amount,
            request.unit.name,
            request.period.label,
            bytes_per_second,
        )
        return bytes_per_second

    def rows(self, bytes_per_second: float) -> list[RateRow]:
        """Scale the base rate to every period, each in its best-fit unit."""
        if bytes_per_second < 0 or not math.isfinite(bytes_per_second):
            raise ValueError("bytes_per_second must be finite and non-negative")
        rows = []
        for period in Period:
            scaled = scale_bytes(bytes_per_second * period.seconds, self._options.unit_system)
            rows.append(RateRow(value=scaled.amount, unit=scaled.unit, period=period))
        return rows

    def format(self, bytes_per_second: float) -> list[str]:
        """Render the aligned table lines for ``bytes_per_second``."""
        return render_rows(self.rows(bytes_per_second), self._options.precision)

    def convert(self, request: RateRequest) -> list[str]:
        """Run the full conversion for a parsed request."""
        return self.format(self.base_rate(request))
