import jax
import jax.numpy as jnp
import pytest


@pytest.fixture
def toy_problem():
    # Noiseless: Y = X @ [1, 1]
    X = jnp.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    Y = jnp.array([1.0, 1.0, 2.0])
    return X, Y


@pytest.fixture
def orthogonal_problem():
    # Columns are orthogonal with squared norm 2 and n = 6, so without
    # centering the l1 solution is soft(b_true, 1.5 * tau) coordinate-wise.
    X = jnp.array(
        [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )
    true_w = jnp.array([3.0, -2.0, 1.0])
    Y = X @ true_w
    return X, Y, true_w


@pytest.fixture
def sparse_regression_problem():
    key = jax.random.PRNGKey(42)
    x_key, noise_key = jax.random.split(key)
    N, D = 50, 10
    X = jax.random.normal(x_key, (N, D))
    true_w = jnp.array([1.5, -2.0, 0.0, 0.0, 3.0, 0.0, 0.0, 0.0, 0.5, 0.0])
    Y = X @ true_w + 0.1 * jax.random.normal(noise_key, (N,)) + 2.0
    return X, Y, true_w
