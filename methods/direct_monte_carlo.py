import numpy as np

from config import ModelParameters
from models.simulate_terminal_prices import (
    simulate_terminal_price,
    simulate_terminal_prices,
)
from payoffs.payoff_european_call import call_payoff, payoff_european_call


def direct_sample(params: ModelParameters, z: float) -> float:
    """Discounted call payoff of the single path driven by draw ``z``."""
    S_T = simulate_terminal_price(params, z)
    return params.discount * call_payoff(S_T, params.strike_price)


def direct_samples(params: ModelParameters, Z: np.ndarray) -> np.ndarray:
    """
    Direct (crude) Monte Carlo samples: one discounted payoff per draw.

    Parameters
    ----------
    params : ModelParameters
        Market and contract inputs.
    Z : np.ndarray
        1D array of standard normal draws.

    Returns
    -------
    np.ndarray
        Discounted payoffs, shape (len(Z),).
    """
    # Both steps run in Numba-jitted kernels.
    S_T = simulate_terminal_prices(params, Z)
    return payoff_european_call(S_T, params.strike_price, params.discount)
