# dualdiff/ops/transcendental.py
import numpy as np
from scipy.special import erf as scipy_erf

from ..core.var import Variable, as_variable, is_number
from ..core.dual import DualNumber
from ..core.errors import DomainError

TWO_OVER_SQRT_PI = 2.0 / np.sqrt(np.pi)


def _out(value, tangent):
    return Variable(DualNumber(value, tangent))


def sin(x):
    x = as_variable(x)
    h = x.value
    return _out(np.sin(h), np.cos(h) * x.tangent)


def cos(x):
    x = as_variable(x)
    h = x.value
    return _out(np.cos(h), -np.sin(h) * x.tangent)


def exp(x):
    x = as_variable(x)
    ex = np.exp(x.value)
    return _out(ex, ex * x.tangent)


def log(x):
    x = as_variable(x)
    if x.value <= 0:
        raise DomainError(f"log of non-positive number {x.value}", op="log", value=x.value)
    return _out(np.log(x.value), x.tangent / x.value)


def pow(x, exponent):
    """
    Power with a constant (non-differentiated) exponent e:
      p           = x^(e-1)     (shared by both parts)
      out.value   = p * x
      out.tangent = e * p * x'

    Domain:
      x == 0, e <= 0       -> DomainError (singular at the origin)
      x == 0, 0 < e < 1    -> derivative is singular; DomainError unless x' == 0
      x < 0, e non-integer -> DomainError (no real result)
    """
    if isinstance(exponent, Variable):
        raise TypeError("pow exponent must be a constant number, not a Variable")
    if not is_number(exponent):
        raise TypeError(f"pow exponent must be a real number, but got {type(exponent)}")
    x = as_variable(x)
    h, t = x.value, x.tangent
    e = np.float64(exponent)

    if h == 0:
        if e <= 0:
            raise DomainError(f"invalid power operation: 0 ** {e}", op="pow", value=h)
        if e < 1:
            if t != 0:
                raise DomainError(
                    f"derivative of x ** {e} is singular at x = 0", op="pow", value=h
                )
            return _out(0.0, 0.0)
    elif h < 0 and e != np.round(e):
        raise DomainError(
            f"negative base {h} with non-integer exponent {e}", op="pow", value=h
        )

    p = np.power(h, e - 1.0)
    return _out(p * h, e * p * t)


def sqrt(x):
    x = as_variable(x)
    h, t = x.value, x.tangent
    if h < 0:
        raise DomainError(f"sqrt of negative number {h}", op="sqrt", value=h)
    if h == 0:
        if t != 0:
            raise DomainError("derivative of sqrt is singular at 0", op="sqrt", value=h)
        return _out(0.0, 0.0)
    s = np.sqrt(h)
    return _out(s, 0.5 * t / s)


def tan(x):
    x = as_variable(x)
    h = x.value
    c = np.cos(h)
    if c == 0:
        raise DomainError(f"tan is undefined at {h}", op="tan", value=h)
    return _out(np.sin(h) / c, x.tangent / (c * c))


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²)
    """
    x = as_variable(x)
    h = x.value
    deriv = TWO_OVER_SQRT_PI * np.exp(-h * h)
    return _out(scipy_erf(h), deriv * x.tangent)
