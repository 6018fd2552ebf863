"""
Elementary functions: chain rule, purity and domain guards.
"""

import math

import numpy as np
import pytest

import dualdiff as dd
from dualdiff import DomainError


XS = [-2.5, -0.3, 0.0, 0.7, 1.0, 3.9]
POSITIVE_XS = [1e-3, 0.5, 1.0, 2.0, 10.0]


# === chain rule ===

@pytest.mark.parametrize("x", XS)
def test_sin_cos_tangents(x):
    s = dd.sin(dd.input(x))
    c = dd.cos(dd.input(x))
    assert s.value == pytest.approx(math.sin(x))
    assert s.tangent == pytest.approx(math.cos(x))
    assert c.value == pytest.approx(math.cos(x))
    assert c.tangent == pytest.approx(-math.sin(x))


@pytest.mark.parametrize("x", XS)
def test_exp_tangent(x):
    e = dd.exp(dd.variable(x, 2.0))
    assert e.value == pytest.approx(math.exp(x))
    assert e.tangent == pytest.approx(2.0 * math.exp(x))


@pytest.mark.parametrize("x", POSITIVE_XS)
def test_log_tangent(x):
    y = dd.log(dd.input(x))
    assert y.value == pytest.approx(math.log(x))
    assert y.tangent == pytest.approx(1.0 / x)


@pytest.mark.parametrize("x,e", [
    (2.0, 3.0),
    (2.0, 0.5),
    (0.5, -2.0),
    (-3.0, 2.0),
    (-2.0, -1.0),
    (4.0, 1.0),
    (7.0, 0.0),
])
def test_pow_tangent(x, e):
    y = dd.pow(dd.input(x), e)
    assert y.value == pytest.approx(x ** e)
    assert y.tangent == pytest.approx(e * x ** (e - 1))


def test_pow_at_zero_with_exponent_at_least_one():
    y = dd.pow(dd.input(0.0), 1.0)
    assert (y.value, y.tangent) == (0.0, 1.0)
    y = dd.pow(dd.input(0.0), 3.0)
    assert (y.value, y.tangent) == (0.0, 0.0)


def test_pow_fractional_at_zero_constant_is_defined():
    y = dd.pow(dd.scalar(0.0), 0.5)
    assert (y.value, y.tangent) == (0.0, 0.0)


@pytest.mark.parametrize("x", POSITIVE_XS)
def test_sqrt_tangent(x):
    y = dd.sqrt(dd.input(x))
    assert y.value == pytest.approx(math.sqrt(x))
    assert y.tangent == pytest.approx(0.5 / math.sqrt(x))


@pytest.mark.parametrize("x", [-1.0, 0.0, 0.4, 1.2])
def test_tan_tangent(x):
    y = dd.tan(dd.input(x))
    assert y.value == pytest.approx(math.tan(x))
    assert y.tangent == pytest.approx(1.0 / math.cos(x) ** 2)


@pytest.mark.parametrize("x", [-1.5, 0.0, 0.3, 2.0])
def test_erf_and_norm_cdf_tangents(x):
    y = dd.erf(dd.input(x))
    assert y.value == pytest.approx(math.erf(x))
    assert y.tangent == pytest.approx(2.0 / math.sqrt(math.pi) * math.exp(-x * x))

    n = dd.norm_cdf(dd.input(x))
    assert n.value == pytest.approx(0.5 * (1.0 + math.erf(x / math.sqrt(2.0))))
    assert n.tangent == pytest.approx(math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi))


def test_constant_argument_has_zero_tangent():
    for fn in (dd.sin, dd.cos, dd.exp, dd.log, dd.sqrt, dd.tan, dd.erf, dd.norm_cdf):
        assert fn(dd.scalar(0.8)).tangent == 0.0


def test_plain_number_argument_is_wrapped():
    y = dd.exp(0.0)
    assert (y.value, y.tangent) == (1.0, 0.0)


# === purity ===

def test_elementary_functions_do_not_mutate_argument():
    v = dd.variable(0.6, 1.5)
    before = v.dual
    for fn in (dd.sin, dd.cos, dd.exp, dd.log, dd.sqrt, dd.tan, dd.erf, dd.norm_cdf):
        out = fn(v)
        assert out is not v
    dd.pow(v, 3.0)
    assert v.dual == before


# === domain errors ===

@pytest.mark.parametrize("x", [0.0, -1.0, -1e-12])
def test_log_non_positive(x):
    with pytest.raises(DomainError) as exc:
        dd.log(dd.scalar(x))
    assert exc.value.op == "log"


@pytest.mark.parametrize("e", [0.0, -1.0, -0.5])
def test_pow_singular_at_origin(e):
    with pytest.raises(DomainError):
        dd.pow(dd.scalar(0.0), e)


def test_pow_fractional_at_zero_with_tangent():
    with pytest.raises(DomainError):
        dd.pow(dd.input(0.0), 0.5)


def test_pow_negative_base_non_integer_exponent():
    with pytest.raises(DomainError):
        dd.pow(dd.input(-2.0), 1.5)


def test_pow_exponent_must_be_constant():
    with pytest.raises(TypeError):
        dd.pow(dd.input(2.0), dd.scalar(2.0))
    with pytest.raises(TypeError):
        dd.input(2.0) ** "2"


def test_sqrt_domain():
    with pytest.raises(DomainError):
        dd.sqrt(dd.scalar(-4.0))
    with pytest.raises(DomainError):
        dd.sqrt(dd.input(0.0))
    y = dd.sqrt(dd.scalar(0.0))
    assert (y.value, y.tangent) == (0.0, 0.0)


def test_domain_error_is_value_error():
    with pytest.raises(ValueError):
        dd.log(dd.scalar(-1.0))


# === cross-check against finite differences ===

def _all_ops(xs):
    x, y, z = xs
    a = dd.sin(x) * dd.cos(y) + dd.exp(z / 4.0)
    b = dd.log(x * x + 1.0) - dd.pow(y, 3.0) / 10.0
    c = dd.sqrt(z + 2.0) * dd.tan(x / 3.0)
    d = dd.erf(y / 2.0) + dd.norm_cdf(z)
    return a + b * c - d


@pytest.mark.parametrize("point", [
    [0.5, 1.0, -0.5],
    [1.3, -0.7, 2.0],
    [-2.0, 0.2, 0.0],
])
def test_every_op_agrees_with_central_differences(point):
    check = dd.check_gradient(_all_ops, point)
    assert check.passed, (check.analytic, check.numeric)
    assert check.max_abs_error < 1e-5
