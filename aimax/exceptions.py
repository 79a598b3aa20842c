"""Shared exception classes for aimax."""


class AimaxError(Exception):
    """Base exception for aimax errors."""


class SourceNotFoundError(AimaxError):
    """Raised when a component's source directory doesn't exist."""


class UnknownComponentError(AimaxError):
    """Raised when a component key is not in the registry."""


class TargetConflictError(AimaxError):
    """Raised when a target path is a directory where a file belongs."""
