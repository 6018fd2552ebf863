# dualdiff/core/var.py
from __future__ import annotations
import numpy as np
from typing import Any, Optional

from .dual import DualNumber, dual_add, dual_sub, dual_mul, dual_div

_NUMERIC = (int, float, np.integer, np.floating)


def is_number(x: Any) -> bool:
    """True for real scalars we are willing to wrap (bools excluded)."""
    return isinstance(x, _NUMERIC) and not isinstance(x, (bool, np.bool_))


class Variable:
    """
    User-facing wrapper around exactly one DualNumber.

    Attributes
    ----------
    dual : DualNumber
        Current (value, tangent) pair. DualNumber is frozen, so the in-place
        helpers below only rebind this reference.
    name : Optional[str]
        Optional debug/pretty-print name.

    Build instances with `scalar`, `input` or `variable` rather than the
    bare constructor.
    """

    __slots__ = ("dual", "name")

    def __init__(self, dual: DualNumber, *, name: Optional[str] = None):
        if not isinstance(dual, DualNumber):
            raise TypeError(f"Variable wraps a DualNumber, but got {type(dual)}")
        self.dual = dual
        self.name = name

    # ---- constructors ----
    @classmethod
    def scalar(cls, value, *, name: Optional[str] = None) -> "Variable":
        return _make(value, 0.0, name=name)

    @classmethod
    def input(cls, value, *, name: Optional[str] = None) -> "Variable":
        return _make(value, 1.0, name=name)

    @classmethod
    def variable(cls, value, tangent, *, name: Optional[str] = None) -> "Variable":
        return _make(value, tangent, name=name)

    # ---- accessors ----
    @property
    def value(self) -> np.float64:
        return self.dual.value

    @property
    def tangent(self) -> np.float64:
        return self.dual.tangent

    def __repr__(self):
        return f"Variable(value={float(self.value)!r}, tangent={float(self.tangent)!r}, name={self.name!r})"

    # ---- in-place sugar over the pure algebra; `other` is never touched ----
    def add_(self, other) -> "Variable":
        self.dual = dual_add(self.dual, as_variable(other).dual)
        return self

    def sub_(self, other) -> "Variable":
        self.dual = dual_sub(self.dual, as_variable(other).dual)
        return self

    def mul_(self, other) -> "Variable":
        self.dual = dual_mul(self.dual, as_variable(other).dual)
        return self

    def div_(self, other) -> "Variable":
        # dual_div raises before anything is rebound
        self.dual = dual_div(self.dual, as_variable(other).dual)
        return self

    # ---- operator overloading (pure) ----
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pos__(self):
        return Variable(self.dual, name=self.name)

    def __pow__(self, exponent):
        from ..ops.transcendental import pow
        return pow(self, exponent)


def _make(value, tangent, *, name: Optional[str] = None) -> Variable:
    """Single construction path: the seed (tangent) is always explicit."""
    if not is_number(value):
        raise TypeError(f"Variable value must be a real number, but got {type(value)}")
    if not is_number(tangent):
        raise TypeError(f"Variable tangent must be a real number, but got {type(tangent)}")
    return Variable(DualNumber(value, tangent), name=name)


def scalar(value, *, name: Optional[str] = None) -> Variable:
    """Constant input: tangent 0."""
    return _make(value, 0.0, name=name)


def input(value, *, name: Optional[str] = None) -> Variable:
    """The input being differentiated: tangent 1."""
    return _make(value, 1.0, name=name)


def variable(value, tangent, *, name: Optional[str] = None) -> Variable:
    """Explicit (value, tangent) pair, e.g. for directional seeds."""
    return _make(value, tangent, name=name)


def as_variable(x) -> Variable:
    """Ensure x is a Variable; otherwise wrap it as a constant."""
    if isinstance(x, Variable):
        return x
    if is_number(x):
        return scalar(x)
    raise TypeError(f"Expected a Variable or a real number, but got {type(x)}")
