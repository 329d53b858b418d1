from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional, Tuple

import pandas as pd
import streamlit as st

# Ensure package import works on Streamlit Cloud when CWD != repo root
_THIS_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_THIS_DIR, "..", ".."))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from rental_payoff.core import plots
from rental_payoff.core.scenarios import (
    Scenario,
    Scenarios,
    add_scenario,
    default_scenarios,
    remove_scenario,
    update_scenario,
)
from rental_payoff.core.simulator import (
    ScenarioParameters,
    Trajectory,
    balances_frame,
    breakdown_frame,
    simulate,
)
from rental_payoff.core.utils import breakdown_line, growth_pct, millions, payoff_label, rate_pct, thousands
from config import (
    LOG_LEVEL,
    HORIZON_YEARS,
    HORIZON_MIN,
    HORIZON_MAX,
    AUTO_SCALE,
    Y_AXIS_MIN,
    Y_AXIS_MAX,
    Y_AXIS_STEP,
    LOAN_AMOUNT,
    MONTHLY_RENTAL,
    INTEREST_RATE,
    RENTAL_INCREASE,
    LOAN_AMOUNT_MIN,
    LOAN_AMOUNT_MAX,
    LOAN_AMOUNT_STEP,
    MONTHLY_RENTAL_MIN,
    MONTHLY_RENTAL_MAX,
    MONTHLY_RENTAL_STEP,
    INTEREST_RATE_MIN,
    INTEREST_RATE_MAX,
    INTEREST_RATE_STEP,
    RENTAL_INCREASE_MIN,
    RENTAL_INCREASE_MAX,
    RENTAL_INCREASE_STEP,
)


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Loan Analysis Dashboard", layout="wide")

SCENARIOS_KEY = "scenarios"


def default_params() -> ScenarioParameters:
    return ScenarioParameters(
        loan_amount=LOAN_AMOUNT,
        monthly_rental=MONTHLY_RENTAL,
        interest_rate=INTEREST_RATE,
        rental_increase=RENTAL_INCREASE,
    )


@st.cache_data(show_spinner=False)
def cached_simulate(params: ScenarioParameters, horizon_years: int) -> Trajectory:
    return simulate(params, horizon_years)


def get_scenarios() -> Scenarios:
    if SCENARIOS_KEY not in st.session_state:
        st.session_state[SCENARIOS_KEY] = default_scenarios(default_params())
    return st.session_state[SCENARIOS_KEY]


def set_scenarios(scenarios: Scenarios) -> None:
    st.session_state[SCENARIOS_KEY] = scenarios


def _on_add() -> None:
    set_scenarios(add_scenario(get_scenarios(), default_params()))


def _on_remove(scenario_id: str) -> None:
    set_scenarios(remove_scenario(get_scenarios(), scenario_id))


def sidebar_controls() -> Tuple[int, Optional[Tuple[float, float]]]:
    st.sidebar.header("Settings")
    horizon_years = int(
        st.sidebar.number_input(
            "Years",
            min_value=HORIZON_MIN,
            max_value=HORIZON_MAX,
            value=min(max(HORIZON_YEARS, HORIZON_MIN), HORIZON_MAX),
            step=1,
        )
    )

    auto_scaled = st.sidebar.toggle("Auto scale Y axis", value=AUTO_SCALE)
    y_range = None
    if not auto_scaled:
        y_min = st.sidebar.number_input("Y-Min", value=Y_AXIS_MIN, step=Y_AXIS_STEP, format="%0.0f")
        y_max = st.sidebar.number_input("Y-Max", value=Y_AXIS_MAX, step=Y_AXIS_STEP, format="%0.0f")
        y_range = (float(y_min), float(y_max))
        if y_min >= y_max:
            st.sidebar.warning("Y-Min should be below Y-Max")

    st.sidebar.button("+ Add", on_click=_on_add, type="primary")
    return horizon_years, y_range


def scenario_inputs(scenario: Scenario, removable: bool) -> Optional[Scenario]:
    """Editable inputs for one scenario; writes changes back to session state.

    Returns the updated scenario, or None when it was just removed.
    """
    sid = scenario.id
    p = scenario.params
    head, remove = st.columns([5, 1])
    with head:
        name = st.text_input("Name", value=scenario.name, key=f"name_{sid}", label_visibility="collapsed")
    with remove:
        if removable:
            st.button("×", key=f"remove_{sid}", on_click=_on_remove, args=(sid,))

    loan_amount = st.number_input(
        "Loan",
        min_value=LOAN_AMOUNT_MIN,
        max_value=LOAN_AMOUNT_MAX,
        value=min(max(float(p.loan_amount), LOAN_AMOUNT_MIN), LOAN_AMOUNT_MAX),
        step=LOAN_AMOUNT_STEP,
        format="%0.0f",
        key=f"loan_{sid}",
    )
    monthly_rental = st.number_input(
        "Rent income",
        min_value=MONTHLY_RENTAL_MIN,
        max_value=MONTHLY_RENTAL_MAX,
        value=min(max(float(p.monthly_rental), MONTHLY_RENTAL_MIN), MONTHLY_RENTAL_MAX),
        step=MONTHLY_RENTAL_STEP,
        format="%0.0f",
        key=f"rental_{sid}",
    )
    interest_rate = st.number_input(
        "Interest rate",
        min_value=INTEREST_RATE_MIN,
        max_value=INTEREST_RATE_MAX,
        value=min(max(float(p.interest_rate), INTEREST_RATE_MIN), INTEREST_RATE_MAX),
        step=INTEREST_RATE_STEP,
        format="%0.3f",
        key=f"rate_{sid}",
    )
    rental_increase = st.number_input(
        "Rent increase",
        min_value=RENTAL_INCREASE_MIN,
        max_value=RENTAL_INCREASE_MAX,
        value=min(max(float(p.rental_increase), RENTAL_INCREASE_MIN), RENTAL_INCREASE_MAX),
        step=RENTAL_INCREASE_STEP,
        format="%0.2f",
        key=f"increase_{sid}",
    )

    scenarios = get_scenarios()
    if sid not in {s.id for s in scenarios}:
        return None
    scenarios = update_scenario(
        scenarios,
        sid,
        name=name,
        loan_amount=float(loan_amount),
        monthly_rental=float(monthly_rental),
        interest_rate=float(interest_rate),
        rental_increase=float(rental_increase),
    )
    set_scenarios(scenarios)
    return next(s for s in scenarios if s.id == sid)


def style_with_commas(df: pd.DataFrame):
    num_cols = [c for c in df.select_dtypes(include=["number"]).columns if c != "year"]
    if len(num_cols) == 0:
        return df
    return df.style.format({col: "{:,.0f}" for col in num_cols})


def render_scenario_card(scenario: Scenario, horizon_years: int, removable: bool) -> None:
    st.markdown(
        f"<div style='border-top: 4px solid {scenario.color}; margin-top: 8px'></div>",
        unsafe_allow_html=True,
    )
    scenario = scenario_inputs(scenario, removable)
    if scenario is None:
        return
    p = scenario.params
    st.caption(
        f"Loan {millions(p.loan_amount)} · Rent {thousands(p.monthly_rental)} · "
        f"Rate {rate_pct(p.interest_rate)} · Rent inc {growth_pct(p.rental_increase)}"
    )

    trajectory = cached_simulate(p, horizon_years)
    st.markdown(payoff_label(trajectory.payoff_point, horizon_years))

    st.markdown("**Yearly Breakdown:**")
    df = breakdown_frame(trajectory)
    st.dataframe(style_with_commas(df), use_container_width=True, hide_index=True, height=200)
    st.download_button(
        "Export CSV",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name=f"breakdown_{scenario.id}.csv",
        mime="text/csv",
        key=f"csv_{scenario.id}",
    )
    with st.expander("As text"):
        st.text("\n".join(breakdown_line(rec) for rec in trajectory.yearly_breakdown))


def render_balances_table(scenarios: Scenarios, trajectories: Dict[str, Trajectory]) -> None:
    st.subheader("Balances")
    labelled = {f"{s.name} ({s.id})": trajectories[s.id] for s in scenarios}
    df = balances_frame(labelled)
    st.dataframe(style_with_commas(df), use_container_width=True, hide_index=True)
    st.download_button(
        "Export CSV Balances",
        data=df.to_csv(index=False).encode("utf-8"),
        file_name="balances.csv",
        mime="text/csv",
    )


def main():
    st.title("Loan Analysis Dashboard")
    horizon_years, y_range = sidebar_controls()

    chart_col, cards_col = st.columns([2, 1])
    with cards_col:
        scenarios = get_scenarios()
        removable = len(scenarios) > 1
        for scenario in scenarios:
            with st.container(border=True):
                render_scenario_card(scenario, horizon_years, removable)

    # Cards above write their edits back before the chart is drawn
    scenarios = get_scenarios()
    trajectories = {s.id: cached_simulate(s.params, horizon_years) for s in scenarios}
    with chart_col:
        fig = plots.balance_curves(scenarios, trajectories, y_range=y_range)
        st.plotly_chart(fig, use_container_width=True)

    st.divider()
    render_balances_table(scenarios, trajectories)
    logger.debug("Rendered %d scenario(s) over %d years", len(scenarios), horizon_years)


if __name__ == "__main__":
    main()
