import jax
import jax.numpy as jnp


def soft_threshold(x: jax.Array, threshold: jax.Array | float) -> jax.Array:
    r"""Soft-thresholding, the proximal operator of $\text{threshold} \times \| \cdot \|_{1}$.

    Entries with magnitude below `threshold` become exactly zero, the others
    shrink toward zero by `threshold` and keep their sign.
    """
    return jnp.sign(x) * jnp.maximum(0, jnp.abs(x) - threshold)


def prox_step(
    point: jax.Array,
    grad: jax.Array,
    step_size: jax.Array | float,
    tau: jax.Array | float,
) -> jax.Array:
    r"""Forward-backward step on $f + \tau \| \cdot \|_{1}$.

    $$
    \beta^{+} := \operatorname{prox}_{\eta \tau \| \cdot \|_{1}}(\beta - \eta \nabla f(\beta))
    $$

    Args:
        point: Current point $\beta$.
        grad: Gradient of the smooth part at `point`.
        step_size: Step size $\eta$.
        tau: Weight of the l1 term.

    Returns:
        The next point.
    """
    return soft_threshold(point - step_size * grad, tau * step_size)
