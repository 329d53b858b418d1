import config
from config import _load_yaml


def test_config_yaml_loaded():
    assert config.CFG["horizon_years"] == config.HORIZON_YEARS
    assert config.HORIZON_MIN <= config.HORIZON_YEARS <= config.HORIZON_MAX
    assert config.Y_AXIS_MIN < config.Y_AXIS_MAX


def test_default_scenario_within_input_bounds():
    assert config.LOAN_AMOUNT_MIN <= config.LOAN_AMOUNT <= config.LOAN_AMOUNT_MAX
    assert config.MONTHLY_RENTAL_MIN <= config.MONTHLY_RENTAL <= config.MONTHLY_RENTAL_MAX
    assert config.INTEREST_RATE_MIN <= config.INTEREST_RATE <= config.INTEREST_RATE_MAX
    assert config.RENTAL_INCREASE_MIN <= config.RENTAL_INCREASE <= config.RENTAL_INCREASE_MAX


def test_missing_file_gives_empty_mapping(tmp_path):
    assert _load_yaml(tmp_path / "absent.yaml") == {}


def test_non_mapping_yaml_ignored(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    assert _load_yaml(path) == {}
