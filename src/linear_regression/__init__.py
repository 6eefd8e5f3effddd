from linear_regression.aggregate import combine, finalise, fit_groups, initialise, update
from linear_regression.config import Hyperparameters
from linear_regression.errors import (
    DimensionMismatch,
    EmptyDataset,
    InvalidHyperparameter,
    RegressionError,
)
from linear_regression.estimator import RidgeRegression
from linear_regression.matrix import Matrix, add, multiply, scalar_multiply, subtract, transpose
from linear_regression.solver import fit_1d, fit_nd, gradient_1d, gradient_nd, solve
from linear_regression.stats import SufficientStatistics, accumulate
