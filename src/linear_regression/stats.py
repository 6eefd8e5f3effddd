from dataclasses import dataclass

from linear_regression.errors import DimensionMismatch
from linear_regression.matrix import Matrix, multiply, transpose


@dataclass(frozen=True)
class SufficientStatistics:
    sigma: Matrix  # (d, d), X^T X
    c: Matrix  # (d, 1), X^T y
    n: int  # number of observations folded in

    @property
    def d(self) -> int:
        return self.sigma.rows

    @classmethod
    def zeros(cls, d: int) -> "SufficientStatistics":
        """Statistics of an empty dataset with d features."""
        return cls(sigma=Matrix.zeros(d, d), c=Matrix.zeros(d, 1), n=0)

    def __add__(self, other: "SufficientStatistics") -> "SufficientStatistics":
        # both are plain sums over disjoint observations, so adding merges them
        if not isinstance(other, SufficientStatistics):
            return NotImplemented
        if self.d != other.d:
            raise DimensionMismatch(
                f"cannot merge statistics of {self.d} and {other.d} features"
            )
        return SufficientStatistics(
            sigma=self.sigma + other.sigma, c=self.c + other.c, n=self.n + other.n
        )


def accumulate(features: Matrix, labels: Matrix) -> SufficientStatistics:
    """
    Reduce a dataset into its sufficient statistics.

    Args:
        features (Matrix): (n, d) feature matrix
        labels (Matrix): (n, 1) label vector, aligned with feature rows

    Returns:
        SufficientStatistics: sigma (d, d), c (d, 1) and n
    """
    if labels.cols != 1:
        raise DimensionMismatch(f"labels must be a column vector, got {labels.shape}")
    if features.rows != labels.rows:
        raise DimensionMismatch(
            f"{features.rows} feature rows but {labels.rows} labels"
        )
    xt = transpose(features)  # (d, n)
    sigma = multiply(xt, features)  # (d, d)
    c = multiply(xt, labels)  # (d, 1)
    return SufficientStatistics(sigma=sigma, c=c, n=features.rows)
