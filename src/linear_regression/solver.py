"""
Ridge regression by batch gradient descent on sufficient statistics.

The cost (1/2n)||X theta - y||^2 + (lam/2)||theta||^2 has gradient
(1/n)(X^T X theta - X^T y) + lam * theta, so after one pass that builds
sigma = X^T X and c = X^T y every iteration costs O(d^2) no matter how many
observations there are. Theta always starts at all ones and is updated exactly
`iterations` times, there is no convergence check.
"""

from collections.abc import Sequence

import numpy as np
from tqdm.auto import tqdm

from linear_regression.config import Hyperparameters
from linear_regression.errors import DimensionMismatch, EmptyDataset
from linear_regression.matrix import DTYPE, Matrix, add, multiply, scalar_multiply, subtract
from linear_regression.stats import SufficientStatistics, accumulate


def gradient_1d(n: int, sigma: float, c: float, theta: float, lam: float) -> np.float32:
    """Scalar gradient (1/n)(sigma * theta - c) + lam * theta."""
    theta = DTYPE(theta)
    return DTYPE(1.0 / n) * (DTYPE(sigma) * theta - DTYPE(c)) + DTYPE(lam) * theta


def fit_1d(
    features: Sequence[float],
    labels: Sequence[float],
    alpha: float,
    lam: float,
    iterations: int,
) -> float:
    """
    Fit y = theta * x for a single feature.

    Args:
        features (Sequence[float]): n feature values
        labels (Sequence[float]): n labels, aligned with features
        alpha (float): learning rate
        lam (float): ridge penalty, 0 for plain least squares
        iterations (int): number of gradient descent updates

    Returns:
        float: fitted theta
    """
    hparams = Hyperparameters(alpha=alpha, lam=lam, iterations=iterations)
    if len(features) != len(labels):
        raise DimensionMismatch(
            f"{len(features)} features but {len(labels)} labels"
        )
    n = len(features)
    if n == 0:
        raise EmptyDataset("cannot fit on 0 observations")

    # same single precision sums as accumulate, no truncation of fractional values
    try:
        x = np.asarray(features, dtype=DTYPE)  # (n,)
        y = np.asarray(labels, dtype=DTYPE)  # (n,)
    except ValueError as err:
        raise DimensionMismatch(f"features and labels must be flat numeric sequences: {err}") from err
    if x.ndim != 1 or y.ndim != 1:
        raise DimensionMismatch(f"expected flat sequences, got shapes {x.shape} and {y.shape}")
    sigma = x @ x
    c = x @ y

    theta = DTYPE(1.0)
    step = DTYPE(hparams.alpha)
    for _ in range(hparams.iterations):
        theta = theta - step * gradient_1d(n, sigma, c, theta, hparams.lam)
    return float(theta)


def gradient_nd(stats: SufficientStatistics, theta: Matrix, lam: float) -> Matrix:
    """Vector gradient (1/n)(sigma @ theta - c) + lam * theta, (d, 1)."""
    residual = subtract(multiply(stats.sigma, theta), stats.c)  # (d, 1)
    return add(scalar_multiply(residual, 1.0 / stats.n), scalar_multiply(theta, lam))


def solve(
    stats: SufficientStatistics, hparams: Hyperparameters, progress: bool = False
) -> Matrix:
    """Run gradient descent from already accumulated statistics, returns (d, 1) theta."""
    if stats.n == 0:
        raise EmptyDataset("cannot fit on 0 observations")
    theta = Matrix.full(stats.d, 1, 1.0)  # (d, 1)
    for _ in tqdm(range(hparams.iterations), desc="gd", leave=False, disable=not progress):
        gradient = gradient_nd(stats, theta, hparams.lam)
        theta = subtract(theta, scalar_multiply(gradient, hparams.alpha))
    return theta


def fit_nd(
    features,
    labels,
    alpha: float,
    lam: float,
    iterations: int,
    progress: bool = False,
) -> Matrix:
    """
    Fit y = X theta for d features.

    Args:
        features: (n, d) Matrix or nested sequence
        labels: (n, 1) Matrix or nested sequence, a flat sequence is read as a column
        alpha (float): learning rate
        lam (float): ridge penalty, 0 for plain least squares
        iterations (int): number of gradient descent updates
        progress (bool, optional): show a progress bar over the iterations

    Returns:
        Matrix: fitted (d, 1) theta
    """
    hparams = Hyperparameters(alpha=alpha, lam=lam, iterations=iterations)
    if not isinstance(features, Matrix) and len(features) == 0:
        raise EmptyDataset("cannot fit on 0 observations")
    if not isinstance(labels, Matrix) and len(labels) == 0:
        raise EmptyDataset("cannot fit on 0 labels")
    stats = accumulate(Matrix(features), Matrix(labels))
    return solve(stats, hparams, progress=progress)
