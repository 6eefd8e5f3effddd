import numpy as np

from linear_regression.config import ALPHA, ITERATIONS, LAM, Hyperparameters
from linear_regression.errors import DimensionMismatch, EmptyDataset
from linear_regression.matrix import DTYPE, Matrix, multiply
from linear_regression.solver import solve
from linear_regression.stats import accumulate


def _as_rows(x) -> Matrix:
    """Observations as a (batch, d) Matrix, a flat input is a single observation."""
    if isinstance(x, Matrix):
        return x
    try:
        x = np.asarray(x, dtype=DTYPE)
    except ValueError as err:
        raise DimensionMismatch(f"rows must be numeric and of equal length: {err}") from err
    x = x.reshape(1, -1) if x.ndim < 2 else x  # (batch, d)
    return Matrix(x)


class RidgeRegression:
    def __init__(
        self,
        alpha: float = ALPHA,
        lam: float = LAM,
        iterations: int = ITERATIONS,
        progress: bool = False,
    ) -> None:
        self.hparams = Hyperparameters(alpha=alpha, lam=lam, iterations=iterations)
        self.progress = progress
        self.fitted = False

    def fit(self, x, y):
        if not isinstance(x, Matrix) and len(x) == 0:
            raise EmptyDataset("cannot fit on 0 observations")
        # flat x and y become (batch, 1) columns
        stats = accumulate(Matrix(x), Matrix(y))
        self.theta_ = solve(stats, self.hparams, progress=self.progress)  # (d, 1)
        self.n_features_in_ = stats.d
        self.fitted = True
        return self

    def predict(self, x) -> Matrix:
        if not self.fitted:
            raise RuntimeError("Estimator is not fitted")
        x = _as_rows(x)
        if x.cols != self.n_features_in_:
            raise DimensionMismatch(
                f"fitted on {self.n_features_in_} features, got {x.cols}"
            )
        return multiply(x, self.theta_)  # (batch, 1)
