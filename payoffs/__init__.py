from .payoff_european_call import call_payoff, payoff_european_call

__all__ = ["call_payoff", "payoff_european_call"]
