import math


def _norm_cdf(x: float) -> float:
    """Return the standard normal cumulative distribution function Φ(x).

    Uses the complementary error function identity:
        Φ(x) = 0.5 * erfc(-x / sqrt(2)),
    which keeps full relative precision in the lower tail.
    """
    return 0.5 * math.erfc(-x / math.sqrt(2.0))


def black_scholes_call(
    S0: float,
    K: float,
    sigma: float,
    r: float,
    T: float,
    q: float = 0.0,
) -> float:
    """Price a European call option using the Black–Scholes–Merton model.

    Assumes:
    - Underlying follows geometric Brownian motion.
    - Constant risk-free rate r, volatility sigma and continuous dividend
      yield q.

    Handles edge cases cleanly:
    - If T <= 0, returns intrinsic value max(S0 - K, 0).
    - If sigma <= 0, treats the underlying as deterministic under r - q.

    Parameters
    ----------
    S0:
        Current spot price of the underlying (must be > 0).
    K:
        Strike price (must be > 0 for log(S0 / K) to be defined).
    sigma:
        Volatility (annualized, must be >= 0).
    r:
        Continuously-compounded risk-free rate.
    T:
        Time to maturity in years (must be >= 0).
    q:
        Continuously-compounded dividend yield.

    Returns
    -------
    float
        The Black–Scholes–Merton price of the European call option.
    """
    # At/after expiry the option is worth its intrinsic value.
    if T <= 0.0:
        return max(S0 - K, 0.0)

    # No randomness: under risk-neutral measure S_T is deterministic.
    if sigma <= 0.0:
        # Risk-neutral forward price: F = S0 * exp((r - q)T).
        forward = S0 * math.exp((r - q) * T)

        # Discounted payoff of a call: exp(-rT) * max(F - K, 0).
        return math.exp(-r * T) * max(forward - K, 0.0)

    sqrt_T = math.sqrt(T)
    vol_sqrt_T = sigma * sqrt_T

    d1 = (math.log(S0 / K) + (r - q + 0.5 * sigma * sigma) * T) / vol_sqrt_T
    d2 = d1 - vol_sqrt_T

    # Price = S0 * exp(-qT) * Φ(d1) - K * exp(-rT) * Φ(d2).
    discounted_spot = S0 * math.exp(-q * T)
    discounted_strike = K * math.exp(-r * T)
    return discounted_spot * _norm_cdf(d1) - discounted_strike * _norm_cdf(d2)


def black_scholes_price(params) -> float:
    """Closed-form call price for a ``config.ModelParameters`` instance."""
    return black_scholes_call(
        S0=params.starting_price,
        K=params.strike_price,
        sigma=params.volatility,
        r=params.risk_free_rate,
        T=params.time_to_maturity,
        q=params.dividend_yield,
    )
