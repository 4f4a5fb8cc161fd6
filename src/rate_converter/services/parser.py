"""Turn free-form command line input into a structured rate request."""

from __future__ import annotations

import logging
import math
import re
from types import MappingProxyType
from typing import Iterable

from rate_converter.models import ByteUnit, Period, RateRequest
from rate_converter.services.exceptions import (
    InvalidAmount,
    MissingArgument,
    UnknownPeriod,
    UnknownUnit,
)

LOGGER = logging.getLogger(__name__)

# Lazy amount so that a trailing alphabetic run always becomes the unit.
_QUANTITY_PATTERN = re.compile(r"(?P<amount>.*?)\s*(?P<unit>[A-Za-z]*)", re.DOTALL)
_AMOUNT_PATTERN = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?", re.ASCII)
_SCIENTIFIC_PATTERN = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?[eE][+-]?[0-9]+", re.ASCII)

_PERIODS_BY_SPELLING = MappingProxyType(
    {spelling: period for period in Period for spelling in period.spellings}
)


def join_arguments(tokens: Iterable[str]) -> str:
    """Join CLI tokens so spaced and compact forms parse the same way."""
    return " ".join(tokens)


def parse_rate(text: str) -> RateRequest:
    """Parse expressions such as ``10 MB / s`` or ``14tb/day``."""
    stripped = text.strip()
    if not stripped:
        raise MissingArgument("amount")

    quantity, slash, period_token = stripped.partition("/")
    quantity = quantity.strip()
    if not quantity:
        raise MissingArgument("amount")

    amount_token, unit_token = _QUANTITY_PATTERN.fullmatch(quantity).group("amount", "unit")
    if not amount_token:
        # The whole segment was alphabetic, e.g. "abcMB".
        raise InvalidAmount(quantity, "not a valid number")

    amount = parse_amount(amount_token)
    unit = parse_unit(unit_token)
    if not slash:
        raise MissingArgument("period", "expected '/' followed by a period")
    period = parse_period(period_token)

    request = RateRequest(amount=amount, unit=unit, period=period)
    LOGGER.debug("Parsed %r as %s", text, request)
    return request


def parse_amount(token: str) -> float:
    """Parse a plain decimal number; scientific notation is rejected."""
    token = token.strip()
    if not token:
        raise MissingArgument("amount")
    if not _AMOUNT_PATTERN.fullmatch(token):
        if _SCIENTIFIC_PATTERN.fullmatch(token):
            raise InvalidAmount(token, "scientific notation is not supported")
        raise InvalidAmount(token, "not a valid number")

    amount = float(token)
    if not math.isfinite(amount):
        raise InvalidAmount(token, "number is too large")
    if amount < 0:
        raise InvalidAmount(token, "a rate cannot be negative")
    # Normalise -0 so the table never shows a signed zero.
    return 0.0 if amount == 0 else amount


def parse_unit(token: str) -> ByteUnit:
    token = token.strip()
    if not token:
        raise MissingArgument("unit")
    try:
        return ByteUnit[token.upper()]
    except KeyError:
        raise UnknownUnit(token, "not a recognized unit") from None


def parse_period(token: str) -> Period:
    token = token.strip()
    if not token:
        raise MissingArgument("period")
    period = _PERIODS_BY_SPELLING.get(token.lower())
    if period is None:
        raise UnknownPeriod(token, "not a recognized time period")
    return period
