# tests/training/test_gradient_engine.py
import math

import pytest

from ft_linreg.training.engines.gradient_engine import FINITE_DIFFERENCE_STEP, estimate_gradient


def test_step_is_tiny_but_nonzero():
    assert FINITE_DIFFERENCE_STEP == 1e-10


def test_quadratic_bowl_at_origin():
    def f(a, b):
        return (a - 3) ** 2 + (b - 5) ** 2

    da, db = estimate_gradient(f, 0.0, 0.0)

    assert da == pytest.approx(-6.0, abs=1e-3)
    assert db == pytest.approx(-10.0, abs=1e-3)


def test_forward_difference_formula():
    calls = []

    def f(a, b):
        calls.append((a, b))
        return a * a

    h = 0.5
    da, db = estimate_gradient(f, 1.0, 2.0, h=h)

    # forward: (1.5^2 - 1^2) / 0.5 = 2.5, central would give 2.0
    assert da == pytest.approx(2.5)
    assert db == 0.0
    assert (1.5, 2.0) in calls
    assert (1.0, 2.5) in calls
    assert all(a >= 1.0 and b >= 2.0 for a, b in calls)


def test_nan_propagates():
    da, db = estimate_gradient(lambda a, b: float("nan"), 0.0, 0.0)

    assert math.isnan(da)
    assert math.isnan(db)


def test_zero_step_rejected():
    with pytest.raises(ValueError):
        estimate_gradient(lambda a, b: a + b, 0.0, 0.0, h=0.0)
