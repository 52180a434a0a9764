"""Tests for rounding and millisecond formatting."""

from __future__ import annotations

import pytest

from bootup.utils.formatting import NBSP, format_milliseconds, round_half_up


@pytest.mark.parametrize(
    "value, places, expected",
    [
        (1500.4, 1, 1500.4),
        (0.05, 1, 0.1),
        (2.25, 1, 2.3),
        (1500.449, 1, 1500.4),
        (0.04, 1, 0.0),
        (12.0, 1, 12.0),
        (3.14159, 2, 3.14),
    ],
)
def test_round_half_up(value: float, places: int, expected: float) -> None:
    assert round_half_up(value, places) == expected


@pytest.mark.parametrize(
    "ms, granularity, expected",
    [
        (1500.4, 1, "1,500"),
        (1500.5, 1, "1,501"),
        (0.0, 1, "0"),
        (1704.6, 10, "1,700"),
        (1705.0, 10, "1,710"),
        (4, 10, "0"),
        (12.34, 0.1, "12.3"),
        (1234567.0, 1, "1,234,567"),
    ],
)
def test_format_milliseconds(ms: float, granularity: float, expected: str) -> None:
    assert format_milliseconds(ms, granularity) == f"{expected}{NBSP}ms"


def test_format_milliseconds_default_granularity() -> None:
    assert format_milliseconds(1999.0) == f"2,000{NBSP}ms"


@pytest.mark.parametrize("granularity", [0, -1, float("inf")])
def test_format_milliseconds_rejects_bad_granularity(granularity: float) -> None:
    with pytest.raises(ValueError):
        format_milliseconds(1.0, granularity)
