from .black_scholes import black_scholes_call, black_scholes_price
from .normal_source import NormalSource
from .simulate_terminal_prices import (
    simulate_terminal_price,
    simulate_terminal_prices,
    terminal_price_factors,
)

__all__ = [
    "black_scholes_call",
    "black_scholes_price",
    "NormalSource",
    "simulate_terminal_price",
    "simulate_terminal_prices",
    "terminal_price_factors",
]
