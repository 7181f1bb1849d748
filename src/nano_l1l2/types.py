from typing import Any, NamedTuple, Sequence

import jax

ArrayLike = Any
"""Anything `jnp.asarray` accepts (lists, NumPy arrays, JAX arrays)."""

Tau = float | Sequence[float] | jax.Array
"""Sparsity weight: a single value or an explicit ordered sequence."""


class InvalidArgumentError(ValueError):
    """Raised when a mandatory input is missing or an option is out of range."""


class L1L2Config(NamedTuple):
    """Options for `l1l2_learn`.

    Attributes:
        rls_par: De-biasing weight. `None` disables the de-biasing step.
        smooth_par: Weight of the l2 term, relative to the datafit Lipschitz
            constant.
        max_iter: Iteration budget of each continuation stage.
        tol: Relative tolerance of the last stage. Earlier stages use a looser one.
        offset: Fit an unpenalized intercept by centering the data.
        verbose: Print progress along the path.
    """

    rls_par: float | None = None
    smooth_par: float = 0.0
    max_iter: int = 100_000
    tol: float = 1e-6
    offset: bool = True
    verbose: bool = False

    def validate(self) -> "L1L2Config":
        if self.smooth_par < 0:
            raise InvalidArgumentError("smooth_par must be >= 0")
        if self.max_iter < 1:
            raise InvalidArgumentError("max_iter must be >= 1")
        if self.tol <= 0:
            raise InvalidArgumentError("tol must be > 0")
        if self.rls_par is not None and self.rls_par < 0:
            raise InvalidArgumentError("rls_par must be >= 0")
        return self


def make_config(**options) -> L1L2Config:
    """Build a validated config from keyword options."""
    unknown = sorted(set(options) - set(L1L2Config._fields))
    if unknown:
        raise InvalidArgumentError(
            f"Unknown option(s): {unknown}. Expected any of {list(L1L2Config._fields)}"
        )
    return L1L2Config(**options).validate()


class FISTAResult(NamedTuple):
    """Outcome of one accelerated proximal gradient stage.

    Attributes:
        coef: Final iterate.
        n_iter: Number of iterations consumed.
        converged: False when the stage stopped on the iteration budget.
    """

    coef: jax.Array
    n_iter: jax.Array
    converged: jax.Array


class L1L2Result(NamedTuple):
    """Fitted sparse linear model.

    Attributes:
        coef: Coefficient vector of length d.
        intercept: Offset of the model (0 when offset is disabled).
        n_iter: Total number of iterations over all continuation stages.
    """

    coef: jax.Array
    intercept: jax.Array
    n_iter: int
