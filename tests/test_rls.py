import jax
import jax.numpy as jnp
import pytest
from nano_l1l2 import ridge_regression


def test_least_squares_recovers_exact_fit():
    X = jax.random.normal(jax.random.PRNGKey(0), (20, 4))
    true_w = jnp.array([1.0, -2.0, 0.5, 3.0])
    coef = ridge_regression(X, X @ true_w)
    assert jnp.allclose(coef, true_w, atol=1e-4)


def test_ridge_matches_normal_equations():
    key_x, key_y = jax.random.split(jax.random.PRNGKey(1))
    X = jax.random.normal(key_x, (15, 5))
    Y = jax.random.normal(key_y, (15,))
    lam = 0.3

    expected = jnp.linalg.solve(X.T @ X + lam * 15 * jnp.eye(5), X.T @ Y)
    assert jnp.allclose(ridge_regression(X, Y, lam), expected, atol=1e-4)


def test_ridge_wide_design_uses_dual_form():
    key_x, key_y = jax.random.split(jax.random.PRNGKey(2))
    X = jax.random.normal(key_x, (4, 9))
    Y = jax.random.normal(key_y, (4,))
    lam = 0.5

    expected = jnp.linalg.solve(X.T @ X + lam * 4 * jnp.eye(9), X.T @ Y)
    assert jnp.allclose(ridge_regression(X, Y, lam), expected, atol=1e-4)


def test_least_squares_wide_design_is_min_norm():
    key_x, key_y = jax.random.split(jax.random.PRNGKey(3))
    X = jax.random.normal(key_x, (3, 7))
    Y = jax.random.normal(key_y, (3,))

    coef = ridge_regression(X, Y)
    assert jnp.allclose(X @ coef, Y, atol=1e-4)
    assert jnp.allclose(coef, jnp.linalg.pinv(X) @ Y, atol=1e-4)


def test_ridge_rejects_negative_weight():
    with pytest.raises(ValueError):
        ridge_regression(jnp.eye(2), jnp.ones(2), -1.0)
