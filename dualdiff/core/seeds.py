# dualdiff/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dx_i/dx_i = 1, every other input 0) and let the tangent
# grow forward through f. One pass per input dimension gives the gradient.
#-----------------------------------------------------------------------------
from __future__ import annotations
import warnings
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import numpy as np

from .config import GradientConfig, DEFAULT_CONFIG
from .errors import ADError
from .var import Variable, input, is_number
from .engine import as_point, evaluate_pass, run_passes, seed_inputs


@dataclass
class PartialResult:
    """Outcome of one per-dimension pass."""
    index: int
    value: Optional[float]       # f(point); None if the pass failed
    tangent: Optional[float]     # ∂f/∂x_index; None if the pass failed
    error: Optional[ADError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _unit_seeds(n: int) -> np.ndarray:
    # row i is e_i
    return np.eye(n, dtype=np.float64)


def _check_finite(grad: np.ndarray, config: GradientConfig) -> None:
    if not config.check_finite:
        return
    for i in np.flatnonzero(~np.isfinite(grad)):
        warnings.warn(
            f"partial derivative {i} is not finite: {grad[i]}",
            RuntimeWarning,
            stacklevel=3,
        )


# ----------------------------- full gradient ----------------------------- #
def gradient(f: Callable[[List[Variable]], Variable],
             point,
             config: Optional[GradientConfig] = None) -> np.ndarray:
    """
    Gradient of a scalar-output function y=f(xs) at `point`.

    Runs n forward passes; pass i seeds x_i with tangent 1 and every other
    input with tangent 0, so its output tangent is exactly ∂f/∂x_i.
    The first DivisionByZero/DomainError raised by any pass propagates.

    Example
    -------
    f = lambda xs: xs[0] * xs[1]
    gradient(f, [2.0, 3.0]) -> array([3., 2.])
    """
    config = config or DEFAULT_CONFIG
    point = as_point(point)
    n = point.shape[0]
    if n == 0:
        return np.zeros(0)

    passes = run_passes(f, point, _unit_seeds(n), config)
    grad = np.array([dual.tangent for dual, _ in passes], dtype=np.float64)
    _check_finite(grad, config)
    return grad


def value_and_gradient(f: Callable[[List[Variable]], Variable],
                       point,
                       config: Optional[GradientConfig] = None) -> Tuple[float, np.ndarray]:
    """Same as gradient(), but also returns f(point)."""
    config = config or DEFAULT_CONFIG
    point = as_point(point)
    n = point.shape[0]
    if n == 0:
        return evaluate_pass(f, point, point).value, np.zeros(0)

    passes = run_passes(f, point, _unit_seeds(n), config)
    grad = np.array([dual.tangent for dual, _ in passes], dtype=np.float64)
    _check_finite(grad, config)
    # every pass sees the same primal inputs, so any one carries f(point)
    return passes[0][0].value, grad


def gradient_partials(f: Callable[[List[Variable]], Variable],
                      point,
                      config: Optional[GradientConfig] = None) -> List[PartialResult]:
    """
    Run the n passes independently and report each one.

    A pass that raises DivisionByZero/DomainError yields a PartialResult with
    `error` set instead of aborting the whole computation. Other exceptions
    still propagate.
    """
    config = config or DEFAULT_CONFIG
    point = as_point(point)
    n = point.shape[0]
    if n == 0:
        return []

    passes = run_passes(f, point, _unit_seeds(n), config, capture=True)
    results = []
    for i, (dual, err) in enumerate(passes):
        if err is not None:
            results.append(PartialResult(index=i, value=None, tangent=None, error=err))
        else:
            results.append(PartialResult(index=i, value=dual.value, tangent=dual.tangent))
    # failed passes count as finite here; their error is reported instead
    _check_finite(
        np.array([r.tangent if r.ok else 0.0 for r in results], dtype=np.float64), config
    )
    return results


# ----------------------------- single pass ----------------------------- #
def directional_derivative(f: Callable[[List[Variable]], Variable],
                           point,
                           direction) -> Tuple[float, float]:
    """
    One pass with inputs seeded along `direction`.

    Returns (f(point), ∇f(point) · direction).
    """
    dual = evaluate_pass(f, point, direction)
    return dual.value, dual.tangent


def derivative(f: Callable[[Variable], Variable], x) -> float:
    """Derivative of a single-input function f at x."""
    y = f(input(x))
    if isinstance(y, Variable):
        return y.tangent
    if is_number(y):
        return np.float64(0.0)
    raise TypeError(f"f must return a Variable, but got {type(y)}")


__all__ = [
    "PartialResult",
    "gradient",
    "value_and_gradient",
    "gradient_partials",
    "directional_derivative",
    "derivative",
    "seed_inputs",
]
