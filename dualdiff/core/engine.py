# dualdiff/core/engine.py
"""
Per-dimension pass execution.

A pass builds fresh seeded inputs, evaluates the user function once and
returns the resulting DualNumber. Passes share no state, so they can be run
in a plain loop or spread over a thread/process pool; results always come
back in seed order.
"""
from __future__ import annotations
import numpy as np
from typing import Callable, List, Optional, Sequence, Tuple
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor

from .config import GradientConfig, DEFAULT_CONFIG
from .dual import DualNumber
from .errors import ADError
from .var import Variable, variable, is_number


def as_point(point) -> np.ndarray:
    """Coerce an evaluation point to a 1-D float64 array."""
    arr = np.asarray(point, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"point must be a 1-D sequence of numbers, got shape {arr.shape}")
    return arr


def seed_inputs(point, seed) -> List[Variable]:
    """
    Build one fresh input list: x_j = (point[j], seed[j]).

    seed = e_i gives input(point[i]) and scalar(point[j]) elsewhere.
    """
    point = as_point(point)
    seed = as_point(seed)
    if seed.shape != point.shape:
        raise ValueError(
            f"seed length {seed.shape[0]} does not match point length {point.shape[0]}"
        )
    return [variable(p, s, name=f"x{j}") for j, (p, s) in enumerate(zip(point, seed))]


def evaluate_pass(f: Callable[[List[Variable]], Variable], point, seed) -> DualNumber:
    """Run f once on freshly seeded inputs and return its DualNumber."""
    y = f(seed_inputs(point, seed))
    if isinstance(y, Variable):
        return y.dual
    if is_number(y):
        # f ignored its inputs: a constant has zero tangent
        return DualNumber(y, 0.0)
    raise TypeError(f"f must return a Variable, but got {type(y)}")


def _run_pass(args) -> Tuple[Optional[DualNumber], Optional[ADError]]:
    """
    Worker function for one pass.

    With `capture` set, differentiation failures are returned instead of
    raised so one bad dimension does not sink the others.
    """
    f, point, seed, capture = args
    try:
        return evaluate_pass(f, point, seed), None
    except ADError as err:
        if not capture:
            raise
        return None, err


def run_passes(f: Callable,
               point,
               seeds: Sequence,
               config: Optional[GradientConfig] = None,
               capture: bool = False) -> List[Tuple[Optional[DualNumber], Optional[ADError]]]:
    """
    Evaluate f once per seed.

    Args:
        f: function taking a list of Variables and returning a Variable
        point: evaluation point (length n)
        seeds: sequence of direction vectors, each of length n
        config: execution settings (defaults if None)
        capture: return ADErrors per pass instead of raising the first one

    Returns:
        list of (DualNumber or None, ADError or None), in seed order
    """
    config = config or DEFAULT_CONFIG
    point = as_point(point)
    args_list = [(f, point, seed, capture) for seed in seeds]

    parallel = config.parallel and len(args_list) > 1
    if config.verbose:
        print("Forward passes:")
        print(f"  Inputs: {point.shape[0]}")
        print(f"  Passes: {len(args_list)}")
        if parallel:
            print(f"  Workers: {config.n_workers}")
        print(f"  Mode: {('processes' if config.use_processes else 'threads') if parallel else 'sequential'}")

    if not parallel:
        return [_run_pass(args) for args in args_list]

    ExecutorClass = ProcessPoolExecutor if config.use_processes else ThreadPoolExecutor
    with ExecutorClass(max_workers=config.n_workers) as executor:
        return list(executor.map(_run_pass, args_list))
