import pytest

from multibar.statistics import (
    Statistics,
    check_requested_width,
    percentage_round,
    string_width,
    strip_ansi,
    truncate,
)


def test_statistics_defaults():
    stat = Statistics()
    assert (stat.total, stat.current, stat.completed) == (0, 0, False)


@pytest.mark.parametrize("total", [0, -5])
def test_percentage_non_positive_total(total):
    assert percentage_round(total, 10, 50) == 0


@pytest.mark.parametrize("current", [60, 61, 1000])
def test_percentage_full_when_current_reaches_total(current):
    assert percentage_round(60, current, 77) == 77


def test_percentage_round_value():
    assert percentage_round(100, 40, 95) == 38


def test_percentage_monotonic():
    values = [percentage_round(100, c, 80) for c in range(101)]
    assert values == sorted(values)
    assert values[0] == 0 and values[-1] == 80


def test_check_requested_width():
    assert check_requested_width(0, 80) == 80
    assert check_requested_width(60, 80) == 60
    assert check_requested_width(90, 80) == 80


def test_string_width_double():
    assert string_width("の") == 2 * string_width("a")
    assert string_width("") == 0


def test_truncate_short_unchanged():
    assert truncate("abc", 10, "…") == "abc"


def test_truncate_long():
    out = truncate("0" * 20, 8, "…")
    assert out.endswith("…")
    assert string_width(out) <= 8
    assert out.startswith("0")


def test_strip_ansi():
    assert strip_ansi("\x1b[31;1mabc\x1b[0m") == "abc"
    assert strip_ansi("plain") == "plain"