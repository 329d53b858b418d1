import pytest

from rental_payoff.core.simulator import YearRecord
from rental_payoff.core.utils import (
    breakdown_line,
    growth_pct,
    millions,
    payoff_label,
    rate_pct,
    rgba,
    split_payoff,
    thousands,
)


@pytest.mark.parametrize(
    "payoff, expected",
    [
        (10.0, (10, 0)),
        (10.9423, (10, 11)),
        (3.5, (3, 6)),
        (1 / 12, (0, 1)),
        (4.99, (4, 12)),
    ],
)
def test_split_payoff(payoff, expected):
    assert split_payoff(payoff) == expected


def test_payoff_label_paid_off():
    assert payoff_label(10.9423, 20) == "Paid off: 10y 11m"


@pytest.mark.parametrize("payoff", [None, float("nan"), float("inf")])
def test_payoff_label_not_paid_off(payoff):
    assert payoff_label(payoff, 20) == "Not paid off in 20 years"


def test_breakdown_line():
    rec = YearRecord(year=1, balance_start=1_600_000, interest_accrued=160_000, rental_applied=192_000, balance_end=1_568_000)
    assert breakdown_line(rec) == "Year 1: Start: 1600000. Interest: 160000. Rental: 192000. End: 1568000"


def test_rgba_from_rgb():
    assert rgba("rgb(255, 99, 132)", 0.2) == "rgba(255, 99, 132, 0.2)"


def test_rgba_leaves_other_notations():
    assert rgba("#ff0000", 0.2) == "#ff0000"


def test_compact_captions():
    assert millions(1_600_000) == "1.6M"
    assert thousands(16_000) == "16k"
    assert rate_pct(0.1) == "10.0%"
    assert growth_pct(1.06) == "6.0%"
