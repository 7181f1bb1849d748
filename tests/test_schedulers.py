import warnings

import jax.numpy as jnp
import pytest
from nano_l1l2 import InvalidArgumentError, build_path, center, geometric_taus, tau_max


def test_tau_max(toy_problem):
    X, Y = toy_problem
    # 2 * ||X^T Y||_inf / n = 2 * 3 / 3
    assert jnp.allclose(tau_max(X, Y), 2.0)


def test_geometric_taus():
    taus = geometric_taus(0.01, 1.0, 3)
    assert jnp.allclose(taus, jnp.array([0.01, 0.1, 1.0]), rtol=1e-5)


def test_build_path_scalar(sparse_regression_problem):
    X, Y, _ = sparse_regression_problem
    Xc, Yc, _, _ = center(X, Y)
    top = float(tau_max(Xc, Yc))
    tau = top / 1000

    path = build_path(tau, Xc, Yc, 1e-6)

    assert len(path.taus) == 10
    assert path.taus[-1] == tau
    assert path.taus[0] == pytest.approx(top, rel=1e-4)
    assert all(a > b for a, b in zip(path.taus, path.taus[1:]))
    # Constant ratio between consecutive values
    ratios = [a / b for a, b in zip(path.taus, path.taus[1:])]
    assert ratios == pytest.approx([ratios[0]] * 9, rel=1e-3)

    assert path.tols[-1] == 1e-6
    assert path.tols[:-1] == pytest.approx((1e-4,) * 9)


def test_build_path_above_tau_max(toy_problem):
    X, Y = toy_problem
    path = build_path(5.0, X, Y, 1e-6)
    assert path.taus == (5.0,)
    assert path.tols == (1e-6,)


def test_build_path_explicit_sequence_largest_first(toy_problem):
    # Increasing array with the target first, walked from the end
    X, Y = toy_problem
    path = build_path([0.01, 0.1, 1.0], X, Y, 1e-6)
    assert path.taus == (1.0, 0.1, 0.01)
    assert path.taus[-1] == min(path.taus)
    assert path.tols == pytest.approx((1e-4, 1e-4, 1e-6))


def test_build_path_explicit_sequence_any_order(toy_problem):
    X, Y = toy_problem
    path = build_path([0.5, 0.1, 0.3], X, Y, 1e-5)
    assert path.taus == (0.5, 0.3, 0.1)
    assert path.tols == pytest.approx((1e-3, 1e-3, 1e-5))


@pytest.mark.parametrize("tau", [[0.5, 0.1], (0.5, 0.1), jnp.array([0.5, 0.1]), 0.3])
def test_build_path_no_deprecation_warning(toy_problem, tau):
    X, Y = toy_problem
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        path = build_path(tau, X, Y, 1e-6)
    assert path.taus[-1] == pytest.approx(min(path.taus))


def test_build_path_custom_factor(toy_problem):
    X, Y = toy_problem
    path = build_path([0.5, 0.1], X, Y, 1e-5, loose_factor=1.0)
    assert path.tols == (1e-5, 1e-5)


@pytest.mark.parametrize("tau", [0.0, -1.0, [], [0.1, -0.1]])
def test_build_path_rejects_bad_tau(toy_problem, tau):
    X, Y = toy_problem
    with pytest.raises(InvalidArgumentError):
        build_path(tau, X, Y, 1e-6)
