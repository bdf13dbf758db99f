import numbers
import numpy as np

from typing import Callable, Optional, Sequence

from perceptron.utils.config_loader import get_config_section
from perceptron.utils.error_calls import ShapeMismatchError

class Matrix:
    """Dense 2-D float matrix backed by a numpy array.

    Copying operations are static and return a new Matrix. In-place operations
    are instance methods with a trailing underscore and return ``self``.
    Operand shapes are checked explicitly, numpy broadcasting is never used.
    """
    def __init__(self, rows: int, cols: int):
        self.data = np.zeros((rows, cols), dtype=np.float64)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "Matrix":
        m = cls.__new__(cls)
        m.data = np.asarray(array, dtype=np.float64)
        return m

    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def cols(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self):
        return self.data.shape

    def __repr__(self):
        return f"Matrix(rows={self.rows}, cols={self.cols})"

    def copy(self) -> "Matrix":
        return Matrix._wrap(self.data.copy())

    # --- Conversion ---
    @staticmethod
    def from_array(values: Sequence[float]) -> "Matrix":
        """Column vector from a flat sequence."""
        array = np.array(values, dtype=np.float64)
        if array.ndim != 1:
            raise ShapeMismatchError("1-D sequence", array.shape, "from_array")
        return Matrix._wrap(array.reshape(-1, 1))

    def to_array(self) -> list:
        return self.data.flatten().tolist()

    # --- Initialization ---
    def randomize(self, rng: Optional[np.random.Generator] = None,
                  low: Optional[float] = None, high: Optional[float] = None) -> "Matrix":
        """Fill in place with uniform values in [low, high)."""
        matrix_config = get_config_section('matrix')
        low = matrix_config.get('random_low', -1.0) if low is None else low
        high = matrix_config.get('random_high', 1.0) if high is None else high
        rng = rng if rng is not None else np.random.default_rng()
        self.data[...] = rng.uniform(low, high, size=self.shape)
        return self

    # --- Copying operations ---
    @staticmethod
    def multiply(a: "Matrix", b: "Matrix") -> "Matrix":
        """Standard matrix product a × b."""
        if a.cols != b.rows:
            raise ShapeMismatchError((a.cols, "*"), b.shape, "matrix product")
        return Matrix._wrap(a.data @ b.data)

    @staticmethod
    def add(a: "Matrix", b: "Matrix") -> "Matrix":
        _check_same_shape(a, b, "add")
        return Matrix._wrap(a.data + b.data)

    @staticmethod
    def subtract(a: "Matrix", b: "Matrix") -> "Matrix":
        _check_same_shape(a, b, "subtract")
        return Matrix._wrap(a.data - b.data)

    @staticmethod
    def transpose(a: "Matrix") -> "Matrix":
        return Matrix._wrap(a.data.T.copy())

    @staticmethod
    def map(a: "Matrix", fn: Callable[[float], float]) -> "Matrix":
        return a.copy().map_(fn)

    def abs(self) -> "Matrix":
        return Matrix._wrap(np.abs(self.data))

    def average(self) -> float:
        return float(np.mean(self.data))

    # --- In-place operations ---
    def add_(self, other: "Matrix") -> "Matrix":
        _check_same_shape(self, other, "add_")
        self.data += other.data
        return self

    def multiply_(self, other) -> "Matrix":
        """Elementwise (Hadamard) product with a matrix, or scaling by a scalar."""
        if isinstance(other, Matrix):
            _check_same_shape(self, other, "multiply_")
            self.data *= other.data
        elif isinstance(other, numbers.Real):
            self.data *= other
        else:
            raise TypeError(f"Cannot multiply Matrix by {type(other).__name__}")
        return self

    def map_(self, fn: Callable[[float], float]) -> "Matrix":
        if self.data.size:
            self.data[...] = np.vectorize(fn, otypes=[np.float64])(self.data)
        return self

def _check_same_shape(a: Matrix, b: Matrix, operation: str):
    if a.shape != b.shape:
        raise ShapeMismatchError(a.shape, b.shape, operation)
