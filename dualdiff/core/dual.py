# dualdiff/core/dual.py
from dataclasses import dataclass
import numpy as np

from .errors import DivisionByZero


@dataclass(frozen=True)
class DualNumber:
    """
    One (value, tangent) pair.

    Attributes
    ----------
    value   : np.float64
        Primal value of the computation.
    tangent : np.float64
        Derivative along the seed direction chosen when the inputs were
        built. Not an absolute gradient.
    """
    value: np.float64
    tangent: np.float64

    def __post_init__(self):
        # frozen: go through object.__setattr__ to normalise to float64
        object.__setattr__(self, "value", np.float64(self.value))
        object.__setattr__(self, "tangent", np.float64(self.tangent))


def dual_add(a: DualNumber, b: DualNumber) -> DualNumber:
    return DualNumber(a.value + b.value, a.tangent + b.tangent)


def dual_sub(a: DualNumber, b: DualNumber) -> DualNumber:
    return DualNumber(a.value - b.value, a.tangent - b.tangent)


def dual_mul(a: DualNumber, b: DualNumber) -> DualNumber:
    # Product rule: d(uv) = u'v + uv'
    return DualNumber(a.value * b.value, a.tangent * b.value + a.value * b.tangent)


def dual_div(a: DualNumber, b: DualNumber) -> DualNumber:
    # Quotient rule: d(u/v) = (u'v - uv') / v^2
    if b.value == 0:
        raise DivisionByZero("division by zero", op="div", value=b.value)
    return DualNumber(
        a.value / b.value,
        (a.tangent * b.value - a.value * b.tangent) / (b.value * b.value),
    )


def dual_neg(a: DualNumber) -> DualNumber:
    return DualNumber(-a.value, -a.tangent)
