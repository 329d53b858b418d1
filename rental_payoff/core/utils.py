from __future__ import annotations

import math
import re
from typing import Optional, Tuple

from .simulator import MONTHS_IN_YEAR, YearRecord


_RGB_RE = re.compile(r"^\s*rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)\s*$")


def split_payoff(payoff_point: float) -> Tuple[int, int]:
    """Split a fractional payoff year into whole years and remaining months.

    Months are rounded half up, so a remainder close to a full year gives 12.
    """
    years = math.floor(payoff_point)
    months = math.floor((payoff_point - years) * MONTHS_IN_YEAR + 0.5)
    return int(years), int(months)


def payoff_label(payoff_point: Optional[float], horizon_years: int) -> str:
    if payoff_point is None or not math.isfinite(payoff_point):
        return f"Not paid off in {horizon_years} years"
    years, months = split_payoff(payoff_point)
    return f"Paid off: {years}y {months}m"


def breakdown_line(record: YearRecord) -> str:
    return (
        f"Year {record.year}: Start: {record.balance_start:.0f}. "
        f"Interest: {record.interest_accrued:.0f}. "
        f"Rental: {record.rental_applied:.0f}. "
        f"End: {record.balance_end:.0f}"
    )


def rgba(color: str, alpha: float) -> str:
    """Turn ``rgb(r, g, b)`` into ``rgba(r, g, b, alpha)``.

    Colours in any other notation are returned unchanged.
    """
    match = _RGB_RE.match(color)
    if match is None:
        return color
    r, g, b = match.groups()
    return f"rgba({r}, {g}, {b}, {alpha})"


# Compact captions shown next to the scenario inputs
def millions(value: float) -> str:
    return f"{value / 1_000_000:.1f}M"


def thousands(value: float) -> str:
    return f"{value / 1_000:.0f}k"


def rate_pct(rate: float) -> str:
    return f"{rate * 100:.1f}%"


def growth_pct(factor: float) -> str:
    return f"{(factor - 1) * 100:.1f}%"
