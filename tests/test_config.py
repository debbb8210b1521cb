import pytest

import parameters
from config import (
    ConfigurationError,
    ModelParameters,
    SimulationConfig,
    config_from_mapping,
    default_config,
    load_config,
)


def test_defaults_come_from_parameters_module():
    config = default_config()
    assert config.starting_price == parameters.S0
    assert config.strike_price == parameters.K
    assert config.volatility == parameters.sigma
    assert config.direct_run_count == 6
    assert config.antithetic_base_replicates == 4000
    assert config.replicate_multiplier == 10
    assert config.seed is None


@pytest.mark.parametrize("field", ["volatility", "time_to_maturity", "starting_price", "strike_price"])
@pytest.mark.parametrize("value", [0.0, -0.1])
def test_model_parameters_reject_non_positive(field, value):
    kwargs = dict(
        starting_price=100.0,
        strike_price=100.0,
        volatility=0.2,
        risk_free_rate=0.05,
        time_to_maturity=1.0,
    )
    kwargs[field] = value
    with pytest.raises(ConfigurationError):
        ModelParameters(**kwargs)


def test_model_parameters_reject_nan():
    with pytest.raises(ConfigurationError):
        ModelParameters(100.0, 100.0, 0.2, float("nan"), 1.0)


def test_invalid_volatility_in_simulation_config():
    with pytest.raises(ConfigurationError):
        SimulationConfig(volatility=0.0)


@pytest.mark.parametrize(
    "overrides",
    [
        {"direct_run_count": 0},
        {"antithetic_base_replicates": -5},
        {"replicate_multiplier": 1},
        {"seed": -1},
        {"seed": True},
        {"direct_run_count": 2.5},
        {"chunk_size": 0},
    ],
)
def test_invalid_run_configuration(overrides):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**overrides)


def test_replicate_overflow_is_rejected():
    with pytest.raises(ConfigurationError):
        SimulationConfig(direct_run_count=30)


def test_with_overrides_ignores_none():
    config = default_config().with_overrides(seed=5, direct_run_count=None)
    assert config.seed == 5
    assert config.direct_run_count == parameters.direct_runs


def test_unknown_option_is_rejected():
    with pytest.raises(ConfigurationError):
        config_from_mapping({"number_of_paths": 10})


def test_load_yaml(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text(
        "starting_price: 100\n"
        "strike_price: 105\n"
        "volatility: 0.25\n"
        "seed: 42\n"
        "direct_run_count: 2\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.strike_price == 105
    assert config.seed == 42
    assert config.direct_run_count == 2
    assert config.model_parameters.volatility == 0.25
    # untouched options keep their defaults
    assert config.antithetic_run_count == parameters.antithetic_runs


def test_load_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == default_config()


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.yaml")


def test_load_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("seed: [1, 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_load_non_mapping_yaml(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)
