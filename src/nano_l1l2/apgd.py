from __future__ import annotations

from typing import NamedTuple

import jax
import jax.numpy as jnp

from .prox import prox_step
from .types import FISTAResult


class FISTAState(NamedTuple):
    coef: jax.Array
    aux: jax.Array
    mom_t: jax.Array
    step: jax.Array
    converged: jax.Array


def smooth_grad(
    X: jax.Array, Y: jax.Array, coef: jax.Array, mu: jax.Array | float = 0.0
) -> jax.Array:
    r"""Gradient of $\frac{1}{n}\|Y - X\beta\|^{2} + \mu\|\beta\|^{2}$."""
    n = X.shape[0]
    return 2.0 * (X.T @ (X @ coef - Y)) / n + 2.0 * mu * coef


def objective(
    X: jax.Array,
    Y: jax.Array,
    coef: jax.Array,
    tau: jax.Array | float,
    mu: jax.Array | float = 0.0,
) -> jax.Array:
    r"""Value of $\frac{1}{n}\|Y - X\beta\|^{2} + \mu\|\beta\|^{2} + \tau\|\beta\|_{1}$."""
    residual = Y - X @ coef
    return (
        jnp.mean(residual**2)
        + mu * jnp.sum(coef**2)
        + tau * jnp.sum(jnp.abs(coef))
    )


@jax.jit
def fista(
    X: jax.Array,
    Y: jax.Array,
    tau: jax.Array | float,
    init_coef: jax.Array,
    *,
    lipschitz: jax.Array | float,
    mu: jax.Array | float = 0.0,
    max_iter: jax.Array | int = 100_000,
    tol: jax.Array | float = 1e-6,
) -> FISTAResult:
    r"""Run accelerated proximal gradient descent (FISTA) for one value of tau.

    Minimizes

    $$
    \frac{1}{n}\|Y - X\beta\|^{2} + \mu\|\beta\|^{2} + \tau\|\beta\|_{1}
    $$

    with step size $1 / (2\sigma)$, $\sigma = L_0 + \mu$. Iteration stops when
    $\|\beta_k - \beta_{k-1}\| \le \text{tol}\,\|\beta_{k-1}\|$ or after
    `max_iter` iterations, whichever comes first. Reaching `max_iter` is not an
    error: the last iterate is returned with `converged=False`.

    Args:
        X: Design matrix of shape (n, d).
        Y: Responses of shape (n,).
        tau: Weight of the l1 term.
        init_coef: Warm start of shape (d,).
        lipschitz: Lipschitz constant $L_0$ of the datafit term.
        mu: Weight of the l2 term.
        max_iter: Iteration budget.
        tol: Relative tolerance on successive iterates.

    Returns:
        FISTAResult with the last iterate and the iterations consumed.
    """
    init_coef = jnp.asarray(init_coef, dtype=X.dtype)
    sigma = lipschitz + mu
    # A null design leaves the warm start untouched.
    step_size = jnp.where(
        sigma > jnp.finfo(X.dtype).eps, 1.0 / (2.0 * sigma), 0.0
    ).astype(X.dtype)

    init_state = FISTAState(
        coef=init_coef,
        aux=init_coef,
        mom_t=jnp.array(1.0, dtype=X.dtype),
        step=jnp.array(0, dtype=jnp.int32),
        converged=jnp.array(False, dtype=jnp.bool_),
    )

    def cond_fn(state: FISTAState) -> jax.Array:
        return jnp.logical_and(~state.converged, state.step < max_iter)

    def body_fn(state: FISTAState) -> FISTAState:
        grads = smooth_grad(X, Y, state.aux, mu)
        new_coef = prox_step(state.aux, grads, step_size, tau).astype(X.dtype)

        next_t = (1.0 + jnp.sqrt(1.0 + 4.0 * state.mom_t**2)) / 2.0
        aux = new_coef + ((state.mom_t - 1.0) / next_t) * (new_coef - state.coef)

        delta = jnp.linalg.norm(new_coef - state.coef)
        converged = delta <= tol * jnp.linalg.norm(state.coef)

        return FISTAState(
            coef=new_coef,
            aux=aux,
            mom_t=next_t,
            step=state.step + 1,
            converged=converged,
        )

    final_state = jax.lax.while_loop(cond_fn, body_fn, init_state)

    return FISTAResult(
        coef=final_state.coef,
        n_iter=final_state.step,
        converged=final_state.converged,
    )
