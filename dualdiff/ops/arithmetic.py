# dualdiff/ops/arithmetic.py
from ..core.var import Variable, as_variable
from ..core.dual import dual_add, dual_sub, dual_mul, dual_div, dual_neg


def _binary(x, y, law):
    """
    Generic binary primitive:
      - wraps plain numbers as constants (tangent 0)
      - applies the dual law to both operands
      - returns a fresh Variable; neither input is written to
    """
    x = as_variable(x)
    y = as_variable(y)
    return Variable(law(x.dual, y.dual))


def add(x, y): return _binary(x, y, dual_add)
def sub(x, y): return _binary(x, y, dual_sub)
def mul(x, y): return _binary(x, y, dual_mul)
def div(x, y): return _binary(x, y, dual_div)


def neg(x):
    """
    Unary negation:
      out.value   = -x.value
      out.tangent = -x.tangent
    """
    x = as_variable(x)
    return Variable(dual_neg(x.dual))
