import math

import numpy as np
from numba import njit

from config import ModelParameters


def terminal_price_factors(params: ModelParameters) -> tuple[float, float]:
    """
    Split the GBM terminal price into its deterministic and random parts.

    Under the risk-neutral measure with continuous dividend yield q:
        S(T) = S0 * exp((r - q - sigma^2 / 2) * T + sigma * sqrt(T) * Z)
             = deterministic_part * exp(random_coefficient * Z)

    Returns
    -------
    deterministic_part : float
        S0 * exp((r - q - sigma^2 / 2) * T).
    random_coefficient : float
        sigma * sqrt(T).
    """
    sigma = params.volatility
    T = params.time_to_maturity
    drift = (params.risk_free_rate - params.dividend_yield - 0.5 * sigma * sigma) * T
    deterministic_part = params.starting_price * math.exp(drift)
    random_coefficient = sigma * math.sqrt(T)
    return deterministic_part, random_coefficient


def simulate_terminal_price(params: ModelParameters, z: float) -> float:
    """Terminal price S(T) for a single standard normal draw ``z``."""
    deterministic_part, random_coefficient = terminal_price_factors(params)
    return deterministic_part * math.exp(random_coefficient * z)


@njit
def _simulate_terminal_prices_numba_impl(
    deterministic_part: float,
    random_coefficient: float,
    Z: np.ndarray,
) -> np.ndarray:
    """
    Internal Numba-compiled implementation for terminal price simulation.
    """
    R = Z.shape[0]
    S_T = np.empty(R, dtype=np.float64)
    for i in range(R):
        S_T[i] = deterministic_part * math.exp(random_coefficient * Z[i])
    return S_T


def simulate_terminal_prices(params: ModelParameters, Z: np.ndarray) -> np.ndarray:
    """
    Map a 1D array of standard normal draws to GBM terminal prices.

    Only the terminal value matters for a European payoff, so a single
    exact step from 0 to T replaces a time grid.

    Parameters
    ----------
    params : ModelParameters
        Market and contract inputs.
    Z : np.ndarray
        1D array of standard normal draws, one per path.

    Returns
    -------
    np.ndarray
        Array of shape (len(Z),) with S(T) for each draw.
    """
    deterministic_part, random_coefficient = terminal_price_factors(params)
    Z = np.ascontiguousarray(Z, dtype=np.float64)
    return _simulate_terminal_prices_numba_impl(
        deterministic_part, random_coefficient, Z
    )
