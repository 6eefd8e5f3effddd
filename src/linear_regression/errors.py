class RegressionError(ValueError):
    """Base class for every error raised by this package."""


class DimensionMismatch(RegressionError):
    """Operand shapes violate the precondition of an operation."""


class EmptyDataset(RegressionError):
    """There are no observations to fit on (n == 0)."""


class InvalidHyperparameter(RegressionError):
    """Learning rate, ridge penalty or iteration count is out of range."""
