from .apgd import FISTAState, fista, objective, smooth_grad
from .learn import continuation, debias, l1l2_learn, l1l2_path, predict
from .preprocessing import center, lipschitz
from .prox import prox_step, soft_threshold
from .rls import ridge_regression
from .schedulers import ContinuationPath, build_path, geometric_taus, tau_max
from .types import (
    FISTAResult,
    InvalidArgumentError,
    L1L2Config,
    L1L2Result,
    make_config,
)

__all__ = [
    "l1l2_learn",
    "l1l2_path",
    "predict",
    "continuation",
    "debias",
    "fista",
    "objective",
    "smooth_grad",
    "prox_step",
    "soft_threshold",
    "center",
    "lipschitz",
    "ridge_regression",
    "build_path",
    "geometric_taus",
    "tau_max",
    "ContinuationPath",
    "FISTAState",
    "FISTAResult",
    "L1L2Config",
    "L1L2Result",
    "InvalidArgumentError",
    "make_config",
]
