from __future__ import annotations

from typing import NamedTuple

import jax
import jax.numpy as jnp

from .types import InvalidArgumentError, Tau


class ContinuationPath(NamedTuple):
    """Sparsity weights in traversal order, with the tolerance of each stage.

    The last stage is the one the caller asked for and carries the tightest
    tolerance.
    """

    taus: tuple[float, ...]
    tols: tuple[float, ...]


def tau_max(X: jax.Array, Y: jax.Array) -> jax.Array:
    r"""Smallest tau whose solution is identically zero.

    Zero is optimal for $\frac{1}{n}\|Y - X\beta\|^{2} + \tau\|\beta\|_{1}$ iff
    $\tau \ge \frac{2}{n}\|X^{T}Y\|_{\infty}$.
    """
    return 2.0 * jnp.max(jnp.abs(X.T @ Y)) / X.shape[0]


def geometric_taus(tau: float, tau_top: float, num: int = 10) -> jax.Array:
    """Geometric progression of `num` values from `tau` up to `tau_top` inclusive."""
    if num < 1:
        raise ValueError("num must be >= 1")
    return jnp.geomspace(tau, tau_top, num)


def _check_taus(tau: Tau) -> tuple[tuple[float, ...], bool]:
    is_scalar = jnp.ndim(jnp.asarray(tau)) == 0
    if is_scalar:
        values = (float(tau),)
    else:
        values = tuple(float(t) for t in tau)
    if not values:
        raise InvalidArgumentError("tau cannot be empty")
    if not all(t > 0 for t in values):
        raise InvalidArgumentError(f"tau values must be > 0, got {values}")
    return values, is_scalar


def build_path(
    tau: Tau,
    X: jax.Array,
    Y: jax.Array,
    tol: float,
    *,
    num_taus: int = 10,
    loose_factor: float = 100.0,
) -> ContinuationPath:
    """Build the continuation schedule for `tau`.

    A scalar tau is reached through `num_taus` geometrically spaced values,
    starting at `tau_max(X, Y)`, unless tau already exceeds it. An explicit
    sequence is traversed from its largest value down to its smallest, which
    is the target. Every stage but the last uses `tol * loose_factor`.

    Args:
        tau: Target sparsity weight, or explicit sequence of weights in any
            order (e.g. increasing, with the target first).
        X: Centered design matrix.
        Y: Centered responses.
        tol: Tolerance of the last stage.
        num_taus: Number of values on an automatic path.
        loose_factor: Multiplier applied to `tol` on the intermediate stages.

    Returns:
        ContinuationPath in traversal order.
    """
    taus, is_scalar = _check_taus(tau)

    if is_scalar:
        target = taus[0]
        top = float(tau_max(X, Y))
        if top >= target:
            grid = geometric_taus(target, top, num_taus)[::-1]
            # Pin the last stage to the requested value.
            taus = tuple(float(t) for t in grid[:-1]) + (target,)
    else:
        taus = tuple(sorted(taus, reverse=True))

    tols = (tol * loose_factor,) * (len(taus) - 1) + (tol,)
    return ContinuationPath(taus=taus, tols=tols)
