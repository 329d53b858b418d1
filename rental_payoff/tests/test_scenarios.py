import pytest

from rental_payoff.core.scenarios import (
    PALETTE,
    Scenario,
    add_scenario,
    default_scenarios,
    remove_scenario,
    simulate_all,
    update_scenario,
)
from rental_payoff.core.simulator import ScenarioParameters, simulate


def test_default_scenarios_single_entry():
    scenarios = default_scenarios()
    assert len(scenarios) == 1
    s = scenarios[0]
    assert (s.id, s.name, s.color) == ("1", "Scenario 1", PALETTE[0])
    assert s.params == ScenarioParameters(1_600_000, 16_000, 0.10, 1.06)


def test_add_scenario_returns_new_collection():
    before = default_scenarios()
    after = add_scenario(before)
    assert len(before) == 1
    assert len(after) == 2
    assert after[1].id == "2"
    assert after[1].name == "Scenario 2"
    assert after[1].color == PALETTE[1]


def test_colors_cycle_through_palette():
    scenarios = default_scenarios()
    for _ in range(len(PALETTE)):
        scenarios = add_scenario(scenarios)
    assert scenarios[len(PALETTE)].color == PALETTE[0]


def test_ids_stay_unique_after_removal():
    scenarios = add_scenario(add_scenario(default_scenarios()))
    scenarios = remove_scenario(scenarios, "2")
    scenarios = add_scenario(scenarios)
    ids = [s.id for s in scenarios]
    assert ids == ["1", "3", "4"]


def test_remove_scenario():
    scenarios = add_scenario(default_scenarios())
    remaining = remove_scenario(scenarios, "1")
    assert [s.id for s in remaining] == ["2"]
    assert len(scenarios) == 2


def test_remove_unknown_scenario():
    with pytest.raises(KeyError):
        remove_scenario(default_scenarios(), "42")


def test_update_parameters_and_name():
    scenarios = add_scenario(default_scenarios())
    updated = update_scenario(scenarios, "2", name="High rate", interest_rate=0.15)
    assert updated[1].name == "High rate"
    assert updated[1].params.interest_rate == 0.15
    assert updated[1].params.loan_amount == scenarios[1].params.loan_amount
    assert updated[0] is scenarios[0]
    assert scenarios[1].params.interest_rate == 0.10


def test_update_without_changes_keeps_records():
    scenarios = default_scenarios()
    assert update_scenario(scenarios, "1", name="Scenario 1") == scenarios


def test_update_unknown_field():
    with pytest.raises(TypeError):
        update_scenario(default_scenarios(), "1", horizon_years=10)


def test_update_unknown_scenario():
    with pytest.raises(KeyError):
        update_scenario(default_scenarios(), "9", name="x")


def test_scenario_is_immutable():
    s = Scenario(id="1", name="a", color=PALETTE[0])
    with pytest.raises(AttributeError):
        s.name = "b"


def test_simulate_all_keyed_by_id():
    params = ScenarioParameters(loan_amount=800_000, monthly_rental=9_000, interest_rate=0.09, rental_increase=1.04)
    scenarios = add_scenario(default_scenarios(), params)
    trajectories = simulate_all(scenarios, 15)
    assert list(trajectories) == ["1", "2"]
    assert trajectories["2"] == simulate(params, 15)
    assert all(len(t.balances) == 16 for t in trajectories.values())
