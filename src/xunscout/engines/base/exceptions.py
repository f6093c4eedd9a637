"""Engine-specific exceptions.

Only failures detected by the driver itself live here. Errors raised by the
Xunsearch client (unreachable daemon, malformed project INI, write or query
failures) are never wrapped and reach the caller unchanged.
"""


class EngineError(Exception):
    """Base exception for engine errors."""


class ConfigurationError(EngineError):
    """Raised when engine configuration is missing or invalid."""


class MissingQueryContextError(EngineError):
    """Raised when an operation needs a query context that was never established."""


class EngineNotFoundError(EngineError):
    """Raised when a requested engine is not registered."""
