from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent
CONFIG_PATH = BASE_DIR / "config.yaml"


def _load_yaml(path: Path = CONFIG_PATH) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


CFG = _load_yaml()

LOG_LEVEL: str = str(CFG.get("log_level", "INFO")).upper()

# Horizon
HORIZON_YEARS: int = int(CFG.get("horizon_years", 20))
HORIZON_MIN: int = int(CFG.get("horizon_min", 5))
HORIZON_MAX: int = int(CFG.get("horizon_max", 50))

# Y axis
AUTO_SCALE: bool = bool(CFG.get("auto_scale", True))
Y_AXIS_MIN: float = float(CFG.get("y_axis_min", -500_000))
Y_AXIS_MAX: float = float(CFG.get("y_axis_max", 3_000_000))
Y_AXIS_STEP: float = float(CFG.get("y_axis_step", 100_000))

# Default scenario
LOAN_AMOUNT: float = float(CFG.get("loan_amount", 1_600_000))
MONTHLY_RENTAL: float = float(CFG.get("monthly_rental", 16_000))
INTEREST_RATE: float = float(CFG.get("interest_rate", 0.10))
RENTAL_INCREASE: float = float(CFG.get("rental_increase", 1.06))

# Input constraints
LOAN_AMOUNT_MIN: float = float(CFG.get("loan_amount_min", 500_000))
LOAN_AMOUNT_MAX: float = float(CFG.get("loan_amount_max", 5_000_000))
LOAN_AMOUNT_STEP: float = float(CFG.get("loan_amount_step", 50_000))
MONTHLY_RENTAL_MIN: float = float(CFG.get("monthly_rental_min", 5_000))
MONTHLY_RENTAL_MAX: float = float(CFG.get("monthly_rental_max", 50_000))
MONTHLY_RENTAL_STEP: float = float(CFG.get("monthly_rental_step", 100))
INTEREST_RATE_MIN: float = float(CFG.get("interest_rate_min", 0.05))
INTEREST_RATE_MAX: float = float(CFG.get("interest_rate_max", 0.20))
INTEREST_RATE_STEP: float = float(CFG.get("interest_rate_step", 0.005))
RENTAL_INCREASE_MIN: float = float(CFG.get("rental_increase_min", 1.00))
RENTAL_INCREASE_MAX: float = float(CFG.get("rental_increase_max", 1.15))
RENTAL_INCREASE_STEP: float = float(CFG.get("rental_increase_step", 0.01))
