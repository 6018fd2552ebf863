# dualdiff/core/errors.py
"""
Failures raised while propagating dual numbers.

Both concrete errors also derive from the matching builtin, so callers that
already catch ZeroDivisionError / ValueError keep working.
"""
from typing import Any, Optional


class ADError(Exception):
    """
    Base class for differentiation failures.

    Attributes
    ----------
    op : str
        Name of the primitive that failed (e.g., "div", "log").
    value : Any
        The offending primal value, if any.
    """

    def __init__(self, message: str, *, op: str = "", value: Optional[Any] = None):
        super().__init__(message)
        self.op = op
        self.value = value


class DivisionByZero(ADError, ZeroDivisionError):
    """Divisor's value component is exactly zero."""


class DomainError(ADError, ValueError):
    """Operation applied outside its valid (or differentiable) input range."""
