import numpy as np
from numba import njit

from config import ModelParameters
from models.simulate_terminal_prices import (
    simulate_terminal_price,
    simulate_terminal_prices,
)
from payoffs.payoff_european_call import call_payoff


def antithetic_sample(params: ModelParameters, z: float) -> float:
    """
    Averaged discounted payoff of the antithetic pair (z, -z).

    The pair is one sample: the accumulator sees the average, never the two
    payoffs separately.
    """
    K = params.strike_price
    S_T1 = simulate_terminal_price(params, z)
    S_T2 = simulate_terminal_price(params, -z)
    return 0.5 * params.discount * (call_payoff(S_T1, K) + call_payoff(S_T2, K))


@njit
def _combine_antithetic_pairs(
    S_T1: np.ndarray, S_T2: np.ndarray, K: float, discount: float
) -> np.ndarray:
    n_pairs = S_T1.shape[0]
    samples = np.empty(n_pairs)
    for i in range(n_pairs):
        samples[i] = 0.5 * discount * (call_payoff(S_T1[i], K) + call_payoff(S_T2[i], K))
    return samples


def antithetic_samples(params: ModelParameters, Z: np.ndarray) -> np.ndarray:
    """
    Antithetic Monte Carlo samples for a European call.

    Each draw Z_i is paired with -Z_i; the discounted payoffs of the two
    terminal prices are averaged into a single sample. A batch of n draws
    therefore yields n samples (not 2n), and the negative correlation inside
    each pair is what lowers the sample variance.

    Parameters
    ----------
    params : ModelParameters
        Market and contract inputs.
    Z : np.ndarray
        1D array of standard normal draws, one per pair.

    Returns
    -------
    np.ndarray
        Averaged discounted payoffs, shape (len(Z),).
    """
    Z = np.ascontiguousarray(Z, dtype=np.float64)
    S_T1 = simulate_terminal_prices(params, Z)
    S_T2 = simulate_terminal_prices(params, -Z)
    return _combine_antithetic_pairs(
        S_T1, S_T2, params.strike_price, params.discount
    )
