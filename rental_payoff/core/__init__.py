from .simulator import (
	ScenarioParameters,
	YearRecord,
	Trajectory,
	simulate,
	breakdown_frame,
	balances_frame,
)
from .scenarios import (
	PALETTE,
	Scenario,
	default_scenarios,
	add_scenario,
	remove_scenario,
	update_scenario,
	simulate_all,
)
from .utils import split_payoff, payoff_label, breakdown_line, rgba

__all__ = [
	"ScenarioParameters",
	"YearRecord",
	"Trajectory",
	"simulate",
	"breakdown_frame",
	"balances_frame",
	"PALETTE",
	"Scenario",
	"default_scenarios",
	"add_scenario",
	"remove_scenario",
	"update_scenario",
	"simulate_all",
	"split_payoff",
	"payoff_label",
	"breakdown_line",
	"rgba",
]
