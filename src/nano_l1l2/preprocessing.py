import jax
import jax.numpy as jnp


def center(
    X: jax.Array, Y: jax.Array, offset: bool = True
) -> tuple[jax.Array, jax.Array, jax.Array, jax.Array]:
    """Remove column and response means.

    Args:
        X: Design matrix of shape (n, d).
        Y: Responses of shape (n,).
        offset: If False, the data is returned unchanged and the means are zero,
            so the intercept computed from them is exactly zero.

    Returns:
        Tuple `(X_centered, Y_centered, mean_x, mean_y)`.
    """
    if not offset:
        return X, Y, jnp.zeros(X.shape[1], dtype=X.dtype), jnp.zeros((), dtype=Y.dtype)
    mean_x = jnp.mean(X, axis=0)
    mean_y = jnp.mean(Y)
    return X - mean_x, Y - mean_y, mean_x, mean_y


def lipschitz(X: jax.Array) -> jax.Array:
    """Lipschitz constant `L0 = ||X||_2^2 / n` of the datafit term.

    The largest singular value comes from `jnp.linalg.norm(X, ord=2)`, an exact
    SVD-based value, so the step size derived from it is never too large.
    """
    return jnp.linalg.norm(X, ord=2) ** 2 / X.shape[0]
