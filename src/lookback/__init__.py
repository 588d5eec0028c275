"""lookback — revisit what you wrote in the same week of earlier years."""

__version__ = "0.1.0"
