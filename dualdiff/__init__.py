# dualdiff/__init__.py
# Forward-mode automatic differentiation with dual numbers

from .core.errors import ADError, DivisionByZero, DomainError
from .core.dual import DualNumber
from .core.var import Variable, scalar, input, variable
from .core.config import GradientConfig
from .core.engine import seed_inputs
from .core.seeds import (
    PartialResult,
    gradient,
    value_and_gradient,
    gradient_partials,
    directional_derivative,
    derivative,
)

# Primitive operations
from . import ops
from .ops import (
    add, sub, mul, div, neg,
    sin, cos, tan, exp, log, pow, sqrt, erf,
    norm_cdf,
)

# Finite-difference cross-check
from .check import GradientCheck, central_difference, check_gradient

__version__ = "0.1.0"

__all__ = [
    # Core
    'DualNumber',
    'Variable',
    'scalar',
    'input',
    'variable',
    # Errors
    'ADError',
    'DivisionByZero',
    'DomainError',
    # Drivers
    'GradientConfig',
    'PartialResult',
    'seed_inputs',
    'gradient',
    'value_and_gradient',
    'gradient_partials',
    'directional_derivative',
    'derivative',
    # Ops
    'ops',
    'add', 'sub', 'mul', 'div', 'neg',
    'sin', 'cos', 'tan', 'exp', 'log', 'pow', 'sqrt', 'erf',
    'norm_cdf',
    # Check
    'GradientCheck',
    'central_difference',
    'check_gradient',
]
