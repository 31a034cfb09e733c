"""
Dual-index sparse matrix.

A generic 2D sparse container that keeps a row view and a column view of the same elements.
"""

__version__ = "0.1.0"

from .sparse_matrix import SparseMatrix
from .config import SparseMatrixConfig, DemoConfig
from .demo import run_demo
from .sparse_errors import (
    SparseMatrixConfigError,
    SparseMatrixKeyError,
    SparseMatrixInputError,
    InvalidSizeModeError,
    EmptyDemoCoordinatesError,
    InvalidCoordinateKeyError,
    CoordinateNotFoundError,
    ShapeMismatchError,
    MissingColumnError,
    InvalidCoordinateValueError,
)

__all__ = [
    "SparseMatrix",
    "SparseMatrixConfig",
    "DemoConfig",
    "run_demo",
    "SparseMatrixConfigError",
    "SparseMatrixKeyError",
    "SparseMatrixInputError",
    "InvalidSizeModeError",
    "EmptyDemoCoordinatesError",
    "InvalidCoordinateKeyError",
    "CoordinateNotFoundError",
    "ShapeMismatchError",
    "MissingColumnError",
    "InvalidCoordinateValueError",
]
