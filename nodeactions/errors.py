"""
Exceptions raised by the action engine.

All errors are raised at the point of misuse (a constructor or a lifecycle
call) and never deferred into a later frame.
"""


class ActionError(Exception):
    """Base class for every error raised by nodeactions."""


class InvalidArgument(ActionError, ValueError):
    """An action was configured with a value it cannot run with."""


class UnsupportedOperation(ActionError, NotImplementedError):
    """The action does not support the requested operation (usually reverse)."""


class PreconditionViolation(ActionError, RuntimeError):
    """A lifecycle method was called out of order."""
