"""
Lookback exception hierarchy.

All lookback exceptions inherit from LookbackError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.
"""


class LookbackError(Exception):
    """Base exception class for all lookback errors."""


class ConfigurationError(LookbackError):
    """Raised for configuration errors (missing keys, invalid values)."""


class VaultError(LookbackError):
    """Raised for note vault access errors."""


class VaultNotFoundError(VaultError):
    """Raised when the vault root directory does not exist."""
