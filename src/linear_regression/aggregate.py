"""
Grouped fitting in the initialise / update / combine / finalise shape of an
aggregate function. Partial states are SufficientStatistics, which merge by
plain addition, so rows can be folded in any order and partial states built
over disjoint chunks can be combined.
"""

from collections.abc import Hashable, Sequence

from linear_regression.config import Hyperparameters
from linear_regression.errors import DimensionMismatch
from linear_regression.matrix import Matrix
from linear_regression.solver import solve
from linear_regression.stats import SufficientStatistics, accumulate


def initialise(d: int) -> SufficientStatistics:
    return SufficientStatistics.zeros(d)


def update(state: SufficientStatistics, features, labels) -> SufficientStatistics:
    """Fold a chunk of (n, d) features and (n, 1) labels into state."""
    return state + accumulate(Matrix(features), Matrix(labels))


def combine(a: SufficientStatistics, b: SufficientStatistics) -> SufficientStatistics:
    return a + b


def finalise(
    state: SufficientStatistics, hparams: Hyperparameters, progress: bool = False
) -> Matrix:
    return solve(state, hparams, progress=progress)


def fit_groups(
    keys: Sequence[Hashable], features, labels, hparams: Hyperparameters
) -> dict[Hashable, Matrix]:
    """
    Fit one theta per distinct key.

    Args:
        keys (Sequence[Hashable]): group key of every row
        features: (n, d) feature matrix
        labels: (n, 1) label vector
        hparams (Hyperparameters): shared by every group

    Returns:
        dict[Hashable, Matrix]: (d, 1) theta per key, in first seen key order
    """
    x = Matrix(features).to_numpy()  # (n, d)
    y = Matrix(labels).to_numpy()  # (n, 1)
    if not len(keys) == len(x) == len(y):
        raise DimensionMismatch(
            f"{len(keys)} keys, {len(x)} feature rows and {len(y)} labels"
        )
    # row idx per key
    groups = {}
    for i, key in enumerate(keys):
        groups.setdefault(key, []).append(i)
    states = {
        key: update(initialise(x.shape[1]), x[idx], y[idx]) for key, idx in groups.items()
    }
    return {key: finalise(state, hparams) for key, state in states.items()}
