"""Domain-specific exceptions raised while parsing a rate expression."""

from __future__ import annotations

from rate_converter.models import ByteUnit, Period


class ParseError(ValueError):
    """Raised when one of the amount, unit or period tokens is unusable."""

    field = "input"
    accepted: tuple[str, ...] = ()

    def __init__(self, token: str, reason: str) -> None:
        self.token = token
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        subject = f"{self.field} {self.token!r}" if self.token else self.field
        message = f"{subject}: {self.reason}"
        if self.accepted:
            message += f" ({' '.join(self.accepted)})"
        return message


class InvalidAmount(ParseError):
    """The amount is not a plain, non-negative decimal number."""

    field = "amount"


class UnknownUnit(ParseError):
    """The unit matches none of the byte units."""

    field = "unit"
    accepted = ByteUnit.names()


class UnknownPeriod(ParseError):
    """The period matches none of the known time spans."""

    field = "period"
    accepted = Period.labels()


class MissingArgument(ParseError):
    """One of the three tokens was not supplied at all."""

    def __init__(self, field: str, reason: str | None = None) -> None:
        self.field = field
        self.accepted = _ACCEPTED_BY_FIELD.get(field, ())
        super().__init__("", reason or f"missing {field}")


_ACCEPTED_BY_FIELD = {
    "unit": ByteUnit.names(),
    "period": Period.labels(),
}
