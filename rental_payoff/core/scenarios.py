from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Dict, Optional, Tuple

from .simulator import ScenarioParameters, Trajectory, simulate


logger = logging.getLogger(__name__)

PALETTE: Tuple[str, ...] = (
    "rgb(255, 99, 132)",
    "rgb(54, 162, 235)",
    "rgb(75, 192, 192)",
    "rgb(255, 205, 86)",
    "rgb(153, 102, 255)",
    "rgb(255, 159, 64)",
)

_PARAM_FIELDS = frozenset(f.name for f in fields(ScenarioParameters))
_SCENARIO_FIELDS = frozenset({"name", "color"})


@dataclass(frozen=True)
class Scenario:
    id: str
    name: str
    color: str
    params: ScenarioParameters = field(default_factory=ScenarioParameters)


Scenarios = Tuple[Scenario, ...]


def default_scenarios(params: Optional[ScenarioParameters] = None) -> Scenarios:
    return (Scenario(id="1", name="Scenario 1", color=PALETTE[0], params=params or ScenarioParameters()),)


def _next_id(scenarios: Scenarios) -> str:
    numeric = [int(s.id) for s in scenarios if s.id.isdigit()]
    return str(max(numeric, default=0) + 1)


def _index_of(scenarios: Scenarios, scenario_id: str) -> int:
    for i, s in enumerate(scenarios):
        if s.id == scenario_id:
            return i
    raise KeyError(scenario_id)


def add_scenario(scenarios: Scenarios, params: Optional[ScenarioParameters] = None) -> Scenarios:
    """Return a new collection with one more scenario appended.

    The colour cycles through ``PALETTE`` by collection size and the id is one
    more than the largest numeric id already present.
    """
    new_id = _next_id(scenarios)
    scenario = Scenario(
        id=new_id,
        name=f"Scenario {new_id}",
        color=PALETTE[len(scenarios) % len(PALETTE)],
        params=params or ScenarioParameters(),
    )
    logger.info("Added scenario %s", new_id)
    return tuple(scenarios) + (scenario,)


def remove_scenario(scenarios: Scenarios, scenario_id: str) -> Scenarios:
    idx = _index_of(scenarios, scenario_id)
    logger.info("Removed scenario %s", scenario_id)
    return tuple(scenarios[:idx]) + tuple(scenarios[idx + 1 :])


def update_scenario(scenarios: Scenarios, scenario_id: str, **changes: object) -> Scenarios:
    """Return a new collection where one scenario has ``changes`` applied.

    ``changes`` may name ``name``, ``color`` or any ``ScenarioParameters``
    field (``loan_amount``, ``monthly_rental``, ...).
    """
    unknown = set(changes) - _SCENARIO_FIELDS - _PARAM_FIELDS
    if unknown:
        raise TypeError(f"Unknown scenario field(s): {', '.join(sorted(unknown))}")

    idx = _index_of(scenarios, scenario_id)
    current = scenarios[idx]
    param_changes = {k: v for k, v in changes.items() if k in _PARAM_FIELDS}
    own_changes = {k: v for k, v in changes.items() if k in _SCENARIO_FIELDS}
    updated = replace(current, params=replace(current.params, **param_changes), **own_changes)
    if updated == current:
        return tuple(scenarios)

    logger.info("Updated scenario %s: %s", scenario_id, sorted(changes))
    return tuple(scenarios[:idx]) + (updated,) + tuple(scenarios[idx + 1 :])


def simulate_all(scenarios: Scenarios, horizon_years: int) -> Dict[str, Trajectory]:
    """Simulate every scenario over the shared horizon, keyed by scenario id."""
    return {s.id: simulate(s.params, horizon_years) for s in scenarios}
