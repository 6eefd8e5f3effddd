import numpy as np

from linear_regression.errors import DimensionMismatch

DTYPE = np.float32


class Matrix:
    """
    Immutable dense matrix of single precision floats.

    A flat sequence becomes a column vector (n, 1), the same way the estimators
    reshape 1D inputs. Every operation returns a new Matrix.
    """

    __slots__ = ("_data",)

    def __init__(self, values):
        if isinstance(values, Matrix):
            values = values._data
        try:
            data = np.array(values, dtype=DTYPE)
        except ValueError as err:
            # ragged rows or non numeric values
            raise DimensionMismatch(f"rows must be numeric and of equal length: {err}") from err
        data = data.reshape(-1, 1) if data.ndim == 1 else data  # (r, 1)
        if data.ndim != 2:
            raise DimensionMismatch(f"expected a 2D grid, got {data.ndim} dimensions")
        if data.shape[0] == 0 or data.shape[1] == 0:
            raise DimensionMismatch(f"matrix needs at least 1 row and 1 column, got {data.shape}")
        data.flags.writeable = False
        self._data = data

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        # skip validation for arrays produced by the operations below
        m = cls.__new__(cls)
        data = data.astype(DTYPE, copy=False)
        data.flags.writeable = False
        m._data = data
        return m

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        return cls.full(rows, cols, 0.0)

    @classmethod
    def full(cls, rows: int, cols: int, value: float) -> "Matrix":
        if rows < 1 or cols < 1:
            raise DimensionMismatch(f"matrix needs at least 1 row and 1 column, got ({rows}, {cols})")
        return cls._wrap(np.full((rows, cols), value, dtype=DTYPE))

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def T(self) -> "Matrix":
        return transpose(self)

    def to_numpy(self) -> np.ndarray:
        """Writable copy of the underlying array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def __getitem__(self, idx: tuple[int, int]) -> float:
        i, j = idx
        return float(self._data[i, j])

    def __matmul__(self, other: "Matrix") -> "Matrix":
        return multiply(self, other)

    def __add__(self, other: "Matrix") -> "Matrix":
        return add(self, other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        return subtract(self, other)

    def __mul__(self, scalar: float) -> "Matrix":
        if isinstance(scalar, Matrix):
            return NotImplemented
        return scalar_multiply(self, scalar)

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()})"


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Matrix product, (r, k) @ (k, c) -> (r, c)."""
    if a.cols != b.rows:
        raise DimensionMismatch(f"cannot multiply {a.shape} by {b.shape}")
    return Matrix._wrap(a._data @ b._data)


def add(a: Matrix, b: Matrix) -> Matrix:
    if a.shape != b.shape:
        raise DimensionMismatch(f"cannot add {a.shape} and {b.shape}")
    return Matrix._wrap(a._data + b._data)


def subtract(a: Matrix, b: Matrix) -> Matrix:
    if a.shape != b.shape:
        raise DimensionMismatch(f"cannot subtract {b.shape} from {a.shape}")
    return Matrix._wrap(a._data - b._data)


def scalar_multiply(a: Matrix, scalar: float) -> Matrix:
    return Matrix._wrap(a._data * DTYPE(scalar))


def transpose(a: Matrix) -> Matrix:
    return Matrix._wrap(a._data.T.copy())
