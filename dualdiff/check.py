"""
Finite-difference cross-check for forward-mode gradients.

Formulas:
    ∂f/∂x_i ≈ [f(x + ε e_i) - f(x - ε e_i)] / (2ε)

Passes: 2n evaluations of f on constant inputs, plus the n forward passes
being checked.
"""

from dataclasses import dataclass
from typing import Callable, List
import numpy as np

from .core.var import Variable
from .core.engine import as_point, evaluate_pass
from .core.seeds import gradient


@dataclass
class GradientCheck:
    """Result of comparing forward-mode and finite-difference gradients."""
    analytic: np.ndarray
    numeric: np.ndarray
    max_abs_error: float
    passed: bool


def _value_at(f: Callable[[List[Variable]], Variable], point: np.ndarray) -> float:
    # every input constant: only the primal is needed
    return evaluate_pass(f, point, np.zeros_like(point)).value


def central_difference(f: Callable[[List[Variable]], Variable],
                       point,
                       index: int,
                       epsilon: float = 1e-6) -> float:
    """
    Approximate ∂f/∂x_index at `point` with a symmetric difference quotient.

    Args:
        f: function taking a list of Variables and returning a Variable
        point: evaluation point
        index: which input to bump
        epsilon: bump size

    Returns:
        [f(point + ε e_index) - f(point - ε e_index)] / (2ε)
    """
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    point = as_point(point)
    if not 0 <= index < point.shape[0]:
        raise IndexError(f"index {index} out of range for point of length {point.shape[0]}")

    up = point.copy()
    up[index] += epsilon
    down = point.copy()
    down[index] -= epsilon
    return (_value_at(f, up) - _value_at(f, down)) / (2.0 * epsilon)


def check_gradient(f: Callable[[List[Variable]], Variable],
                   point,
                   rtol: float = 1e-5,
                   atol: float = 1e-7,
                   epsilon: float = 1e-6) -> GradientCheck:
    """Compare gradient(f, point) against central differences."""
    point = as_point(point)
    analytic = gradient(f, point)
    numeric = np.array(
        [central_difference(f, point, i, epsilon) for i in range(point.shape[0])],
        dtype=np.float64,
    )
    max_abs_error = float(np.max(np.abs(analytic - numeric))) if numeric.size else 0.0
    return GradientCheck(
        analytic=analytic,
        numeric=numeric,
        max_abs_error=max_abs_error,
        passed=bool(np.allclose(analytic, numeric, rtol=rtol, atol=atol)),
    )
