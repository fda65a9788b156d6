"""
Scoped Progress - Exceptions

Centralized exception hierarchy for progress reporting errors.
"""


class ProgressError(Exception):
    """Base exception for all progress reporting operations."""
    pass


class ScopeStackError(ProgressError):
    """Exception for scope stack discipline violations.

    Raised when:
    - update() is called with no active scope in the current context
    - A scope is disposed while it is not the top of the stack
    - A scope is disposed twice

    Always indicates a bug in the calling code, never a runtime condition.
    """
    pass


class SinkError(ProgressError):
    """Exception for output sink selection errors.

    Raised when:
    - No sink is registered for an explicitly requested mode

    An explicit mode is honoured even when its sink is unavailable; the sink
    then degrades to plain accumulating lines.
    """
    pass
