import numbers
import numpy as np
import pandas as pd
from dataclasses import dataclass, field
from typing import Generic, Iterator, Optional, TypeVar

from .config import SparseMatrixConfig
from .constants import SizeMode, DataFrameColumn
from .sparse_errors import (
    CoordinateNotFoundError,
    InvalidCoordinateKeyError,
    InvalidCoordinateValueError,
    MissingColumnError,
    ShapeMismatchError,
)


T = TypeVar('T')


INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


def _split_key(key) -> tuple[int, int]:
    if isinstance(key, tuple) and len(key) == 2:
        return key
    raise InvalidCoordinateKeyError(key)


def _coordinate_list(axis: str, coords) -> list[int]:
    """Convert a coordinate sequence to python ints without any lossy cast.

    Integral floats (1.0, as pandas produces for int columns with gaps) are
    accepted; fractional, NaN and inf values, bools and non-numbers are rejected.
    """
    out = []
    bad = []
    for c in np.asarray(coords).tolist():
        if isinstance(c, (bool, np.bool_)):
            bad.append(c)
        elif isinstance(c, numbers.Integral):
            out.append(int(c))
        elif isinstance(c, numbers.Real) and float(c).is_integer():
            out.append(int(c))
        else:
            bad.append(c)
    if len(bad) > 0:
        raise InvalidCoordinateValueError(axis, bad)
    return out


def _coordinate_array(coords: list[int]) -> np.ndarray:
    # int64 when every coordinate fits, otherwise keep the exact python ints
    if all(INT64_MIN <= c <= INT64_MAX for c in coords):
        return np.array(coords, dtype=np.int64)
    return np.array(coords, dtype=object)


@dataclass
class SparseMatrix(Generic[T]):
    """
    Two dimensional sparse matrix backed by a row view and a column view.

    Both views index the same set of (x, y, value) triples:
    rows[x][y] is columns[y][x] for every populated cell, and an outer key
    only exists while its inner dict is non-empty. Point and row lookups go
    through `rows`, column lookups go through `columns`.

    Coordinates are any integers (negative included) and are not range checked.
    Every read returns a new list/dict, never a live view into the storage.
    """

    config: SparseMatrixConfig = field(default_factory=SparseMatrixConfig)
    rows: dict[int, dict[int, T]] = field(default_factory=dict, init=False)
    columns: dict[int, dict[int, T]] = field(default_factory=dict, init=False)
    _element_count: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.config.validate()

    def put(self, x: int, y: int, value: T) -> None:
        """Insert or silently overwrite the element at (x, y)."""
        row = self.rows.setdefault(x, {})
        if y not in row:
            self._element_count += 1
        row[y] = value
        self.columns.setdefault(y, {})[x] = value

    def get(self, x: int, y: int) -> Optional[T]:
        """Get the element at (x, y), or None if the cell is empty."""
        row = self.rows.get(x)
        if row is None:
            return None
        return row.get(y)

    def remove(self, x: int, y: int) -> None:
        """Remove the element at (x, y). Removing an empty cell is a no-op."""
        row = self.rows.get(x)
        if row is None or y not in row:
            return
        del row[y]
        if len(row) == 0:
            del self.rows[x]

        col = self.columns[y]
        del col[x]
        if len(col) == 0:
            del self.columns[y]
        self._element_count -= 1

    def get_elements_in_row(self, x: int) -> list[T]:
        """Returns the elements of row x, or an empty list if the row is unoccupied."""
        row = self.rows.get(x)
        if row is None:
            return []
        return list(row.values())

    def get_elements_in_col(self, y: int) -> list[T]:
        """Returns the elements of column y, or an empty list if the column is unoccupied."""
        col = self.columns.get(y)
        if col is None:
            return []
        return list(col.values())

    def get_all_elements(self) -> list[T]:
        """Returns every stored element exactly once.

        Elements are gathered row by row. No ordering is guaranteed.
        """
        answer = []
        for row in self.rows.values():
            answer.extend(row.values())
        return answer

    def get_size(self) -> int:
        """Returns the size of the matrix as selected by config.size_mode.

        With the default 'rows' mode this is the number of occupied row
        indices, NOT the number of elements: three elements in one row give a
        size of 1. Use len() or size_mode='elements' for the element count.
        """
        if self.config.size_mode == SizeMode.ELEMENTS:
            return self._element_count
        return len(self.rows)

    def get_row(self, x: int) -> dict[int, T]:
        """Returns a copy of row x as {column index: element}."""
        return dict(self.rows.get(x, {}))

    def get_col(self, y: int) -> dict[int, T]:
        """Returns a copy of column y as {row index: element}."""
        return dict(self.columns.get(y, {}))

    def occupied_rows(self) -> list[int]:
        """Returns the row indices holding at least one element."""
        return list(self.rows.keys())

    def occupied_columns(self) -> list[int]:
        """Returns the column indices holding at least one element."""
        return list(self.columns.keys())

    def __getitem__(self, key) -> T:
        """Returns the element at position (x, y).

        Args:
            key: A tuple (x, y), or comma-separated indices x, y

        Returns:
            The element stored at (x, y).

        Raises:
            InvalidCoordinateKeyError: If key is not a tuple of length 2.
            CoordinateNotFoundError: If nothing is stored at (x, y).
        """
        x, y = _split_key(key)
        row = self.rows.get(x)
        if row is None or y not in row:
            raise CoordinateNotFoundError(x, y)
        return row[y]

    def __setitem__(self, key, value: T) -> None:
        """Sets the element at position (x, y).

        Args:
            key: A tuple (x, y), or comma-separated indices x, y
            value: The element to store. Falsy values are stored like any other.
        """
        x, y = _split_key(key)
        self.put(x, y, value)

    def __delitem__(self, key) -> None:
        """Deletes the element at position (x, y), if any.

        Args:
            key: A tuple (x, y), or comma-separated indices x, y
        """
        x, y = _split_key(key)
        self.remove(x, y)

    def __contains__(self, key) -> bool:
        """Checks if position (x, y) holds an element.

        Args:
            key: A tuple (x, y), or comma-separated indices x, y

        Returns:
            True if an element is stored at (x, y), False otherwise (including malformed keys).
        """
        if not (isinstance(key, tuple) and len(key) == 2):
            return False
        x, y = key
        row = self.rows.get(x)
        return row is not None and y in row

    def __len__(self) -> int:
        """Returns the number of stored elements.

        Returns:
            Number of populated coordinates, independent of config.size_mode.
        """
        return self._element_count

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Allows iteration over the populated (x, y) coordinates."""
        return iter(self.keys())

    def keys(self) -> list[tuple[int, int]]:
        """Returns the populated (x, y) coordinates."""
        return [(x, y) for x, row in self.rows.items() for y in row]

    def values(self) -> list[T]:
        """Returns the stored elements."""
        return self.get_all_elements()

    def items(self) -> list[tuple[tuple[int, int], T]]:
        """Returns a list of ((x, y), element) pairs, mimicking dict.items().

        Returns:
            List of tuples containing (coordinate, element) pairs.
        """
        return [((x, y), v) for x, row in self.rows.items() for y, v in row.items()]

    def copy(self) -> 'SparseMatrix[T]':
        """Returns an independent copy of the matrix with the same config."""
        result = SparseMatrix(config=SparseMatrixConfig(size_mode=self.config.size_mode))
        result.rows = {x: dict(row) for x, row in self.rows.items()}
        result.columns = {y: dict(col) for y, col in self.columns.items()}
        result._element_count = self._element_count
        return result

    @classmethod
    def from_arrays(cls, xs, ys, values, config: Optional[SparseMatrixConfig] = None) -> 'SparseMatrix':
        """Builds a matrix from parallel coordinate and value sequences.

        Elements are put in order, so a repeated coordinate keeps its last value.

        Args:
            xs: Row indices (list or numpy array of integers)
            ys: Column indices (list or numpy array of integers)
            values: Elements, one per coordinate
            config: Optional SparseMatrixConfig for the new matrix

        Returns:
            New SparseMatrix holding the given elements.

        Raises:
            ShapeMismatchError: If the three inputs differ in length.
            InvalidCoordinateValueError: If a coordinate is not an integer (e.g. 0.5 or NaN).
        """
        lengths = {'xs': len(xs), 'ys': len(ys), 'values': len(values)}
        if len(set(lengths.values())) != 1:
            raise ShapeMismatchError(lengths)

        # validate both axes before touching the new matrix
        x_list = _coordinate_list('xs', xs)
        y_list = _coordinate_list('ys', ys)
        matrix = cls(config=config) if config is not None else cls()
        for x, y, v in zip(x_list, y_list, values):
            matrix.put(x, y, v)
        return matrix

    def to_arrays(self) -> tuple[np.ndarray, np.ndarray, list[T]]:
        """Returns the populated cells as (xs, ys, values).

        xs and ys are int64 numpy arrays, or object arrays of python ints when
        an axis holds a coordinate outside the int64 range. values stays a
        plain list since the element type is opaque.
        """
        keys = self.keys()
        xs = _coordinate_array([x for x, _ in keys])
        ys = _coordinate_array([y for _, y in keys])
        return xs, ys, self.get_all_elements()

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame,
                       x_col: str = DataFrameColumn.X,
                       y_col: str = DataFrameColumn.Y,
                       value_col: str = DataFrameColumn.VALUE,
                       config: Optional[SparseMatrixConfig] = None) -> 'SparseMatrix':
        """Builds a matrix from a DataFrame with one row per populated cell."""
        for col in [x_col, y_col, value_col]:
            if col not in df.columns:
                raise MissingColumnError(col, df.columns.tolist())
        return cls.from_arrays(df[x_col].to_numpy(), df[y_col].to_numpy(), df[value_col].tolist(), config=config)

    def to_dataframe(self) -> pd.DataFrame:
        """Returns the populated cells as a DataFrame with x, y and value columns."""
        xs, ys, values = self.to_arrays()
        return pd.DataFrame({
            DataFrameColumn.X: xs,
            DataFrameColumn.Y: ys,
            DataFrameColumn.VALUE: pd.Series(values, dtype=object) if len(values) == 0 else values,
        })

    def __repr__(self) -> str:
        """String representation of the matrix."""
        return f"SparseMatrix({len(self)} elements in {len(self.rows)} rows, size_mode={self.config.size_mode!r})"
