import numpy as np
from numba import njit


@njit
def call_payoff(S_T: float, K: float) -> float:
    """Undiscounted call payoff max(S_T - K, 0); exactly 0.0 out of the money."""
    intrinsic = S_T - K
    if intrinsic > 0.0:
        return intrinsic
    return 0.0


@njit
def payoff_european_call(S_T: np.ndarray, K: float, discount: float) -> np.ndarray:
    """
    Compute discounted payoffs of a European call option for a set of
    simulated terminal prices.

    Parameters
    ----------
    S_T : np.ndarray
        1D array of shape (R,) containing simulated terminal prices. For
        best performance, use a C-contiguous float64 array.
    K : float
        Strike price of the call option.
    discount : float
        Discount factor exp(-r * T).

    Returns
    -------
    np.ndarray
        1D array of shape (R,) containing the discounted option payoffs.
    """
    n_paths = S_T.shape[0]
    discounted_payoffs = np.empty(n_paths)
    for i in range(n_paths):
        discounted_payoffs[i] = discount * call_payoff(S_T[i], K)
    return discounted_payoffs
