"""
errors.py: Exceptions raised by the simulation core.
"""


class PumpyError(Exception):
    """Base class for all game errors."""


class ConfigError(PumpyError, ValueError):
    """Raised at construction when tuning constants cannot produce valid obstacles."""


class ObstacleInvariantError(PumpyError, RuntimeError):
    """Raised when the generator is about to emit an obstacle with an unusable gap."""
