# dualdiff/ops/special.py
import numpy as np
from scipy.special import ndtr

from ..core.var import Variable, as_variable
from ..core.dual import DualNumber

SQRT_TWO_PI = np.sqrt(2.0 * np.pi)


def norm_pdf(x):
    return np.exp(-0.5 * x * x) / SQRT_TWO_PI


def norm_cdf(x):
    """Standard normal CDF N(x); tangent is phi(x) * x'."""
    x = as_variable(x)
    return Variable(DualNumber(ndtr(x.value), norm_pdf(x.value) * x.tangent))
