from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Mapping, Optional, Tuple

import pandas as pd


MONTHS_IN_YEAR: Final[int] = 12

BREAKDOWN_COLUMNS: Final[Tuple[str, ...]] = (
    "year",
    "balance_start",
    "interest",
    "rental",
    "balance_end",
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioParameters:
    loan_amount: float = 1_600_000.0
    monthly_rental: float = 16_000.0
    interest_rate: float = 0.10  # annual, as a fraction
    rental_increase: float = 1.06  # multiplicative factor per year


@dataclass(frozen=True)
class YearRecord:
    year: int
    balance_start: float
    interest_accrued: float
    rental_applied: float
    balance_end: float


@dataclass(frozen=True)
class Trajectory:
    years: Tuple[int, ...]
    balances: Tuple[float, ...]
    yearly_breakdown: Tuple[YearRecord, ...]
    payoff_point: Optional[float] = None

    @property
    def is_paid_off(self) -> bool:
        return self.payoff_point is not None


def _crossing_point(year: int, balance_start: float, interest_rate: float, annual_rental: float) -> float:
    """Estimate the fractional year at which the balance reaches zero.

    Parameters
    ----------
    year : int
        1-based year during which the balance crossed zero.
    balance_start : float
        Outstanding balance at the start of that year (strictly positive).
    interest_rate : float
        Annual interest rate as a decimal.
    annual_rental : float
        Rental income in force during that year, before escalation.

    Returns
    -------
    float
        A value in ``(year - 1, year]``. The balance is assumed to fall by a
        constant monthly amount within the year (rental minus the interest on
        the start-of-year balance), so this is a linear approximation.
    """
    monthly_rental = annual_rental / MONTHS_IN_YEAR
    monthly_interest = balance_start * interest_rate / MONTHS_IN_YEAR
    monthly_reduction = monthly_rental - monthly_interest
    if monthly_reduction > 0:
        months_to_zero = balance_start / monthly_reduction
        return (year - 1) + months_to_zero / MONTHS_IN_YEAR
    return float(year)


def simulate(params: ScenarioParameters, horizon_years: int) -> Trajectory:
    """Project the loan balance year by year while rental income pays it down.

    Each year the start-of-year balance accrues ``interest_rate`` once and the
    year's rental income (``12 * monthly_rental`` escalated by
    ``rental_increase`` after every completed year) is subtracted.

    Notes
    -----
    - The balance is not clamped at zero; it keeps evolving for the whole horizon.
    - ``payoff_point`` records the first positive-to-non-positive crossing only.
      A loan that starts at or below zero never gets one.
    - Non-finite inputs propagate through the arithmetic without error.
    """
    if horizon_years < 0:
        raise ValueError(f"horizon_years must be >= 0, got {horizon_years}")

    balance = params.loan_amount
    annual_rental = MONTHS_IN_YEAR * params.monthly_rental
    payoff_point: Optional[float] = None

    years = [0]
    balances = [balance]
    breakdown = []
    for year in range(1, horizon_years + 1):
        balance_start = balance
        interest_accrued = balance_start * params.interest_rate
        balance_end = balance_start + interest_accrued - annual_rental
        breakdown.append(
            YearRecord(
                year=year,
                balance_start=balance_start,
                interest_accrued=interest_accrued,
                rental_applied=annual_rental,
                balance_end=balance_end,
            )
        )

        if payoff_point is None and balance_start > 0 and balance_end <= 0:
            payoff_point = _crossing_point(year, balance_start, params.interest_rate, annual_rental)
            logger.debug("Balance crosses zero in year %d (payoff at %.4f)", year, payoff_point)

        annual_rental = annual_rental * params.rental_increase
        balance = balance_end
        years.append(year)
        balances.append(balance)

    return Trajectory(
        years=tuple(years),
        balances=tuple(balances),
        yearly_breakdown=tuple(breakdown),
        payoff_point=payoff_point,
    )


def breakdown_frame(trajectory: Trajectory) -> pd.DataFrame:
    """Per-year table of a trajectory.

    Columns: year, balance_start, interest, rental, balance_end
    """
    if not trajectory.yearly_breakdown:
        return pd.DataFrame(columns=list(BREAKDOWN_COLUMNS), data=[])

    rows = [
        {
            "year": rec.year,
            "balance_start": rec.balance_start,
            "interest": rec.interest_accrued,
            "rental": rec.rental_applied,
            "balance_end": rec.balance_end,
        }
        for rec in trajectory.yearly_breakdown
    ]
    return pd.DataFrame(rows, columns=list(BREAKDOWN_COLUMNS))


def balances_frame(trajectories: Mapping[str, Trajectory]) -> pd.DataFrame:
    """Wide table of balances: one ``year`` column plus one column per label.

    All trajectories are expected to share the same horizon.
    """
    if not trajectories:
        return pd.DataFrame(columns=["year"], data=[])

    first = next(iter(trajectories.values()))
    df = pd.DataFrame({"year": list(first.years)})
    for label, trajectory in trajectories.items():
        df[label] = list(trajectory.balances)
    return df
