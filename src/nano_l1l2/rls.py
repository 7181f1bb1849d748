import jax
import jax.numpy as jnp


def ridge_regression(X: jax.Array, Y: jax.Array, lam: float = 0.0) -> jax.Array:
    r"""Regularized least squares.

    Solves

    $$
    \min_{\beta} \frac{1}{n}\|Y - X\beta\|^{2} + \lambda\|\beta\|^{2}
    $$

    through the normal equations, in the smaller of the primal (d x d) or dual
    (n x n) forms. With `lam == 0` this is the minimum-norm least-squares
    solution, which stays well defined for rank-deficient designs and d > n.

    Args:
        X: Design matrix of shape (n, d).
        Y: Responses of shape (n,).
        lam: Ridge weight, nonnegative.

    Returns:
        Coefficients of shape (d,).
    """
    if lam < 0:
        raise ValueError("lam must be nonnegative")
    n, d = X.shape
    if d == 0:
        return jnp.zeros((0,), dtype=X.dtype)
    if lam == 0:
        coef, _, _, _ = jnp.linalg.lstsq(X, Y, rcond=None)
        return coef

    if n < d:
        gram = X @ X.T + lam * n * jnp.eye(n, dtype=X.dtype)
        return X.T @ jnp.linalg.solve(gram, Y)
    gram = X.T @ X + lam * n * jnp.eye(d, dtype=X.dtype)
    return jnp.linalg.solve(gram, X.T @ Y)
