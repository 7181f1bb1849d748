from __future__ import annotations

import warnings
from typing import NamedTuple

import jax
import jax.numpy as jnp

from .apgd import fista
from .preprocessing import center, lipschitz
from .rls import ridge_regression
from .schedulers import ContinuationPath, build_path
from .types import (
    ArrayLike,
    InvalidArgumentError,
    L1L2Config,
    L1L2Result,
    Tau,
    make_config,
)


class Stage(NamedTuple):
    tau: float
    coef: jax.Array
    n_iter: int
    converged: bool


class PathOutcome(NamedTuple):
    """Stages solved along a continuation path.

    `degenerate` is True when the walk stopped early because pure l1 had
    already selected at least as many variables as there are samples.
    """

    stages: list[Stage]
    degenerate: bool


def _as_data(X: ArrayLike, Y: ArrayLike) -> tuple[jax.Array, jax.Array]:
    dtype = jnp.result_type(float)
    X = jnp.asarray(X, dtype=dtype)
    Y = jnp.ravel(jnp.asarray(Y, dtype=dtype))
    if X.ndim != 2:
        raise InvalidArgumentError(f"X must be a 2-D matrix, got shape {X.shape}")
    n, d = X.shape
    if n < 1 or d < 1:
        raise InvalidArgumentError(f"X must have at least one row and column, got {X.shape}")
    if Y.shape[0] != n:
        raise InvalidArgumentError(
            f"Y must have one label per row of X. Got {Y.shape[0]} labels for {n} rows"
        )
    return X, Y


def _resolve_config(config: L1L2Config | None, options: dict) -> L1L2Config:
    if config is None:
        return make_config(**options)
    if options:
        raise InvalidArgumentError("Pass either `config` or keyword options, not both.")
    return config.validate()


def continuation(
    X: jax.Array,
    Y: jax.Array,
    path: ContinuationPath,
    *,
    smooth_par: float = 0.0,
    max_iter: int = 100_000,
    verbose: bool = False,
) -> PathOutcome:
    """Solve along `path` with warm restarts.

    Each stage starts from the previous stage's solution. With `smooth_par == 0`,
    the walk stops before any stage once the previous one selected `n` or more
    variables.

    Args:
        X: Centered design matrix of shape (n, d).
        Y: Centered responses of shape (n,).
        path: Sparsity weights and tolerances in traversal order.
        smooth_par: Weight of the l2 term, relative to the Lipschitz constant.
        max_iter: Iteration budget of each stage.
        verbose: Print one line per stage.

    Returns:
        PathOutcome with the solved stages.
    """
    n, d = X.shape
    L0 = lipschitz(X)
    mu = smooth_par * L0

    coef = jnp.zeros(d, dtype=X.dtype)
    selected = 0
    stages: list[Stage] = []

    for tau, tol in zip(path.taus, path.tols):
        if smooth_par == 0 and selected >= n:
            if verbose:
                print(f"{selected} variables selected with {n} samples, leaving the path")
            return PathOutcome(stages=stages, degenerate=True)

        result = fista(X, Y, tau, coef, lipschitz=L0, mu=mu, max_iter=max_iter, tol=tol)
        coef = result.coef
        selected = int(jnp.count_nonzero(coef))
        stages.append(
            Stage(
                tau=tau,
                coef=coef,
                n_iter=int(result.n_iter),
                converged=bool(result.converged),
            )
        )

        if verbose:
            print(
                f"tau={tau:.4e} tol={tol:.1e}: "
                f"iters={int(result.n_iter)}, selected={selected}"
            )

    return PathOutcome(stages=stages, degenerate=False)


def debias(X: jax.Array, Y: jax.Array, coef: jax.Array, rls_par: float) -> jax.Array:
    """Refit `coef` by regularized least squares on its support only."""
    support = jnp.flatnonzero(coef != 0)
    debiased = jnp.zeros_like(coef)
    if support.size == 0:
        return debiased
    return debiased.at[support].set(ridge_regression(X[:, support], Y, rls_par))


def l1l2_learn(
    X: ArrayLike,
    Y: ArrayLike,
    tau: Tau,
    config: L1L2Config | None = None,
    **options,
) -> L1L2Result:
    r"""Fit a sparse linear model by l1l2 regularization.

    Minimizes

    $$
    \frac{1}{n}\|Y - X\beta\|^{2} + \mu\|\beta\|^{2} + \tau\|\beta\|_{1},
    \qquad \mu = \text{smooth\_par} \cdot L_0,
    $$

    by FISTA with a continuation strategy: larger values of tau are solved first
    with a looser tolerance, and each solution warm-starts the next. With
    `smooth_par == 0`, once a stage selects at least `n` variables the path is
    abandoned and the minimum-norm least-squares fit on all variables is
    returned instead; de-biasing is skipped in that case.

    Args:
        X: Design matrix of shape (n, d).
        Y: Responses of shape (n,).
        tau: Weight of the l1 term, or an explicit sequence of weights,
            traversed from the largest to the smallest (the target).
        config: Options as an `L1L2Config`.
        **options: Options as keywords (`rls_par`, `smooth_par`, `max_iter`,
            `tol`, `offset`, `verbose`) when `config` is not given.

    Returns:
        L1L2Result with coefficients, intercept and total iteration count.

    Raises:
        InvalidArgumentError: If an input is missing or an option is out of range.

    Warning:
        If the last stage stops on `max_iter`, a `UserWarning` is emitted and
        the last iterate is returned.
    """
    if X is None or Y is None or tau is None:
        raise InvalidArgumentError("too few inputs: X, Y and tau are all required")

    config = _resolve_config(config, options)
    X, Y = _as_data(X, Y)

    Xc, Yc, mean_x, mean_y = center(X, Y, config.offset)
    path = build_path(tau, Xc, Yc, config.tol)

    if config.verbose:
        print(f"l1l2: n={X.shape[0]}, d={X.shape[1]}, stages={len(path.taus)}")

    outcome = continuation(
        Xc,
        Yc,
        path,
        smooth_par=config.smooth_par,
        max_iter=config.max_iter,
        verbose=config.verbose,
    )
    n_iter = sum(stage.n_iter for stage in outcome.stages)

    if outcome.degenerate:
        coef = ridge_regression(Xc, Yc)
    else:
        last = outcome.stages[-1]
        if not last.converged:
            warnings.warn(
                f"FISTA reached max_iter={config.max_iter} at tau={last.tau:.4e} "
                "without converging.",
                UserWarning,
                stacklevel=2,
            )
        coef = last.coef
        if config.rls_par is not None:
            if config.verbose:
                print(f"De-biasing on {int(jnp.count_nonzero(coef))} variables")
            coef = debias(Xc, Yc, coef, config.rls_par)

    intercept = mean_y - mean_x @ coef
    return L1L2Result(coef=coef, intercept=intercept, n_iter=n_iter)


def l1l2_path(
    X: ArrayLike,
    Y: ArrayLike,
    taus: Tau,
    *,
    smooth_par: float = 0.0,
    max_iter: int = 100_000,
    tol: float = 1e-6,
    offset: bool = True,
    verbose: bool = False,
) -> list[L1L2Result]:
    """Regularization path over `taus`, with warm restarts.

    `taus` are solved from the largest to the smallest, whatever their
    order, all with the same tolerance. With `smooth_par == 0` the path is truncated
    once a solution selects `n` or more variables, so the returned list may be
    shorter than `taus`.

    Returns:
        One L1L2Result per solved tau; `n_iter` is the iteration count of that
        stage alone.
    """
    config = make_config(smooth_par=smooth_par, max_iter=max_iter, tol=tol, offset=offset)
    X, Y = _as_data(X, Y)
    Xc, Yc, mean_x, mean_y = center(X, Y, config.offset)

    if jnp.ndim(jnp.asarray(taus)) == 0:
        taus = (taus,)
    path = build_path(taus, Xc, Yc, config.tol, loose_factor=1.0)
    outcome = continuation(
        Xc,
        Yc,
        path,
        smooth_par=config.smooth_par,
        max_iter=config.max_iter,
        verbose=verbose,
    )
    return [
        L1L2Result(
            coef=stage.coef,
            intercept=mean_y - mean_x @ stage.coef,
            n_iter=stage.n_iter,
        )
        for stage in outcome.stages
    ]


def predict(X: ArrayLike, coef: jax.Array, intercept: jax.Array | float = 0.0) -> jax.Array:
    """Linear model predictions `X @ coef + intercept`."""
    return jnp.asarray(X, dtype=coef.dtype) @ coef + intercept
