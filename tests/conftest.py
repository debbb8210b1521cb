import pytest

from config import ModelParameters, SimulationConfig


@pytest.fixture
def atm_params():
    """Textbook at-the-money contract: S0=K=100, sigma=20%, r=5%, T=1."""
    return ModelParameters(
        starting_price=100.0,
        strike_price=100.0,
        volatility=0.2,
        risk_free_rate=0.05,
        time_to_maturity=1.0,
        dividend_yield=0.0,
    )


@pytest.fixture
def reference_params():
    return SimulationConfig().model_parameters


@pytest.fixture
def small_config():
    return SimulationConfig(
        direct_run_count=3,
        direct_base_replicates=100,
        antithetic_run_count=2,
        antithetic_base_replicates=400,
        seed=2024,
        chunk_size=64,
    )


@pytest.fixture
def frozen_clock():
    """Clock that never advances, for reproducible runtimes."""
    return lambda: 0.0
