# app/errors.py


class InvalidStateError(RuntimeError):
    """Raised when a stopwatch transition is not legal in the current state."""
