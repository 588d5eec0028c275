"""Small utilities shared across lookback."""
