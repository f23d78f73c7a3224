"""
Exceptions raised by the minefield engine.

Gameplay never raises: stale or out-of-bounds clicks are reported as
no-effect outcomes. Only bad board configurations are errors.
"""


class MinefieldError(Exception):
    """Base class for all minefield errors."""


class InvalidConfigurationError(MinefieldError, ValueError):
    """Board size or mine count cannot produce a playable board."""
