"""Classic algorithm solutions and the small data structures behind them."""

__version__ = "0.1.0"