# dualdiff/ops/__init__.py

# Convenience re-exports so users can do: from dualdiff.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg
from .transcendental import sin, cos, tan, exp, log, pow, sqrt, erf
from .special import norm_cdf

__all__ = [
    "add", "sub", "mul", "div", "neg",
    "sin", "cos", "tan", "exp", "log", "pow", "sqrt", "erf",
    "norm_cdf",
]
