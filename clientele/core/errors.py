"""Exceptions raised by the Clientele core."""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument that violates its precondition.

    Messages are short and stable so callers can match on them.
    """


class IdPoolExhaustedError(RuntimeError):
    """Raised when an id pool cannot draw enough fresh ids from its source."""
