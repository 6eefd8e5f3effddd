import math
import numbers
from dataclasses import dataclass

from linear_regression.errors import InvalidHyperparameter

# reference hparams of the bundled datasets
ALPHA = 0.01
LAM = 0.0
ITERATIONS = 100


@dataclass(frozen=True)
class Hyperparameters:
    alpha: float = ALPHA  # learning rate, > 0
    lam: float = LAM  # ridge penalty, >= 0, 0 disables it
    iterations: int = ITERATIONS  # fixed number of updates, no early stopping

    def __post_init__(self):
        if isinstance(self.iterations, bool) or not isinstance(
            self.iterations, numbers.Integral
        ):
            raise InvalidHyperparameter(
                f"iterations must be an integer, got {self.iterations!r}"
            )
        if self.iterations < 0:
            raise InvalidHyperparameter(
                f"iterations must be >= 0, got {self.iterations}"
            )
        for name in ("alpha", "lam"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidHyperparameter(f"{name} must be a real number, got {value!r}")
        if not math.isfinite(self.alpha) or self.alpha <= 0:
            raise InvalidHyperparameter(f"alpha must be finite and > 0, got {self.alpha}")
        if not math.isfinite(self.lam) or self.lam < 0:
            raise InvalidHyperparameter(f"lam must be finite and >= 0, got {self.lam}")


reference_hparams = {
    "1d": Hyperparameters(alpha=0.01, lam=0.0, iterations=100),
    "2d": Hyperparameters(alpha=0.01, lam=0.0, iterations=100),
    "3d": Hyperparameters(alpha=0.01, lam=0.4, iterations=100),
}
