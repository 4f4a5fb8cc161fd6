import math

import pytest

from rate_converter.models import ByteUnit, Period, RateRequest
from rate_converter.services.exceptions import (
    InvalidAmount,
    MissingArgument,
    ParseError,
    UnknownPeriod,
    UnknownUnit,
)
from rate_converter.services.parser import (
    join_arguments,
    parse_amount,
    parse_period,
    parse_rate,
    parse_unit,
)


@pytest.mark.parametrize(
    "text",
    ["1B/s", "1 B/s", "1B /s", "1B/ s", "1B / s", "1 B/ s", "1 B / s", " 1 B / s ", "1\tB\t/\ts"],
)
def test_parse_rate_tolerates_whitespace(text: str) -> None:
    assert parse_rate(text) == RateRequest(amount=1.0, unit=ByteUnit.B, period=Period.SEC)


def test_parse_rate_compact_form() -> None:
    assert parse_rate("14tb/day") == RateRequest(amount=14.0, unit=ByteUnit.TB, period=Period.DAY)


def test_join_arguments_matches_single_string() -> None:
    joined = join_arguments(["10", "MB", "/", "s"])

    assert joined == "10 MB / s"
    assert parse_rate(joined) == parse_rate("10MB/s")


@pytest.mark.parametrize("token", ["b", "B", "kB", "Kb", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"])
def test_parse_unit_is_case_insensitive(token: str) -> None:
    assert parse_unit(token) is ByteUnit[token.upper()]


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("s", Period.SEC),
        ("S", Period.SEC),
        ("sec", Period.SEC),
        ("SeC", Period.SEC),
        ("second", Period.SEC),
        ("m", Period.MIN),
        ("min", Period.MIN),
        ("minute", Period.MIN),
        ("h", Period.HOUR),
        ("hr", Period.HOUR),
        ("hour", Period.HOUR),
        ("d", Period.DAY),
        ("day", Period.DAY),
        ("w", Period.WEEK),
        ("wk", Period.WEEK),
        ("week", Period.WEEK),
        ("mon", Period.MONTH),
        ("month", Period.MONTH),
        ("y", Period.YEAR),
        ("yr", Period.YEAR),
        ("YEAR", Period.YEAR),
    ],
)
def test_parse_period_spellings(token: str, expected: Period) -> None:
    assert parse_period(token) is expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [("1", 1.0), ("123", 123.0), ("1.25", 1.25), ("+2", 2.0), ("007", 7.0)],
)
def test_parse_amount_accepts_plain_decimals(token: str, expected: float) -> None:
    assert parse_amount(token) == expected


def test_parse_amount_drops_sign_of_zero() -> None:
    amount = parse_amount("-0")

    assert amount == 0.0
    assert math.copysign(1.0, amount) == 1.0


@pytest.mark.parametrize(
    "token",
    ["x", "1.", ".5", "1.2.3", "192.168.1.1", "４", "--1", "1,5", "5e", "1e+", "e5"],
)
def test_parse_amount_rejects_malformed_numbers(token: str) -> None:
    with pytest.raises(InvalidAmount, match="not a valid number"):
        parse_amount(token)


@pytest.mark.parametrize("token", ["1e7", "2.5E3", "1e-3"])
def test_parse_amount_rejects_scientific_notation(token: str) -> None:
    with pytest.raises(InvalidAmount, match="scientific notation"):
        parse_amount(token)


def test_parse_amount_rejects_negative_rates() -> None:
    with pytest.raises(InvalidAmount, match="negative"):
        parse_amount("-33")


def test_parse_amount_rejects_overflowing_numbers() -> None:
    with pytest.raises(InvalidAmount, match="too large"):
        parse_amount("9" * 400)


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("", MissingArgument),
        ("   ", MissingArgument),
        ("/s", MissingArgument),
        ("1", MissingArgument),
        ("1 / s", MissingArgument),
        ("1B", MissingArgument),
        ("1B/", MissingArgument),
        ("1Bps", UnknownUnit),
        ("1Bs", UnknownUnit),
        ("x MB/s", InvalidAmount),
        ("abc MB / s", InvalidAmount),
        ("abcMB/s", InvalidAmount),
        ("1e7 MB/s", InvalidAmount),
        ("1e7MB/s", InvalidAmount),
        ("-33 MB/s", InvalidAmount),
        ("192.168.1.1 MB/s", InvalidAmount),
        ("４ MB/s", InvalidAmount),
        ("4 XB/s", UnknownUnit),
        ("4 ML/s", UnknownUnit),
        ("4 MMMB/s", UnknownUnit),
        ("4 MB/fortnight", UnknownPeriod),
        ("4 MB/s/s", UnknownPeriod),
        ("4 MB / s x", UnknownPeriod),
    ],
)
def test_parse_rate_reports_the_offending_token(text: str, error: type) -> None:
    with pytest.raises(error):
        parse_rate(text)


def test_parse_rate_rejects_foreign_separator() -> None:
    with pytest.raises(ParseError):
        parse_rate("1B:s")


def test_parse_errors_are_value_errors() -> None:
    for error in (InvalidAmount, UnknownUnit, UnknownPeriod, MissingArgument):
        assert issubclass(error, ParseError)
    assert issubclass(ParseError, ValueError)


def test_error_messages_list_accepted_values() -> None:
    with pytest.raises(UnknownUnit) as unit_error:
        parse_rate("4 XB/s")
    with pytest.raises(UnknownPeriod) as period_error:
        parse_rate("4 MB/fortnight")

    assert str(unit_error.value) == "unit 'XB': not a recognized unit (B KB MB GB TB PB EB ZB YB)"
    assert unit_error.value.token == "XB"
    assert str(period_error.value) == (
        "period 'fortnight': not a recognized time period (sec min hour day week month year)"
    )


def test_missing_argument_names_the_field() -> None:
    with pytest.raises(MissingArgument) as missing:
        parse_rate("10 / s")

    assert missing.value.field == "unit"
    assert str(missing.value).startswith("unit: missing unit")


def test_dangling_exponent_marker_is_malformed_not_scientific() -> None:
    with pytest.raises(InvalidAmount) as error:
        parse_rate("5e MB/s")

    assert str(error.value) == "amount '5e': not a valid number"
