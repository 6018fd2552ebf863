# dualdiff/core/__init__.py

"""
Core public API for the dualdiff package.

Exports:
    DualNumber    : The frozen (value, tangent) pair and its algebra.
    Variable      : The user-facing wrapper around one DualNumber.
    scalar/input/variable : Constructors (tangent 0, tangent 1, explicit).
    gradient      : One forward pass per input dimension -> full gradient.
    ADError, DivisionByZero, DomainError : Typed failures.
"""

from .errors import ADError, DivisionByZero, DomainError
from .dual import DualNumber, dual_add, dual_sub, dual_mul, dual_div, dual_neg
from .var import Variable, scalar, input, variable, as_variable
from .config import GradientConfig
from .engine import seed_inputs
from .seeds import (
    PartialResult,
    gradient,
    value_and_gradient,
    gradient_partials,
    directional_derivative,
    derivative,
)

__all__ = [
    "ADError", "DivisionByZero", "DomainError",
    "DualNumber", "dual_add", "dual_sub", "dual_mul", "dual_div", "dual_neg",
    "Variable", "scalar", "input", "variable", "as_variable",
    "GradientConfig",
    "seed_inputs",
    "PartialResult", "gradient", "value_and_gradient", "gradient_partials",
    "directional_derivative", "derivative",
]
