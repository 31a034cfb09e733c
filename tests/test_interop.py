import pytest
import os
import sys
import numpy as np
import pandas as pd

# Add the src directory to Python path to import local dual_sparse
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from dual_sparse import (
    SparseMatrix,
    SparseMatrixConfig,
    ShapeMismatchError,
    MissingColumnError,
    InvalidCoordinateValueError,
    SparseMatrixInputError,
)
from test_utils import validate_views


@pytest.fixture
def cells() -> tuple[np.ndarray, np.ndarray, list]:
    xs = np.array([0, 1000, -3, 1000])
    ys = np.array([0, 5, 7, 6])
    values = ["a", "b", "c", "d"]
    return xs, ys, values


def test_from_arrays(cells):
    xs, ys, values = cells
    matrix = SparseMatrix.from_arrays(xs, ys, values)
    assert matrix.get(1000, 5) == "b"
    assert matrix.get(-3, 7) == "c"
    assert sorted(matrix.get_elements_in_row(1000)) == ["b", "d"]
    assert matrix.get_size() == 3
    assert all(type(x) is int for x in matrix.occupied_rows())
    validate_views(matrix)


def test_from_arrays_duplicate_keeps_last():
    matrix = SparseMatrix.from_arrays([1, 1], [2, 2], ["old", "new"])
    assert matrix.get(1, 2) == "new"
    assert len(matrix) == 1


def test_from_arrays_config():
    matrix = SparseMatrix.from_arrays([0, 0], [0, 1], [1, 2], config=SparseMatrixConfig(size_mode='elements'))
    assert matrix.get_size() == 2


def test_from_arrays_shape_mismatch():
    with pytest.raises(ShapeMismatchError) as exc_info:
        SparseMatrix.from_arrays([0, 1], [0], [1, 2])
    assert exc_info.value.lengths == {'xs': 2, 'ys': 1, 'values': 2}


def test_to_arrays(cells):
    xs, ys, values = cells
    matrix = SparseMatrix.from_arrays(xs, ys, values)
    out_x, out_y, out_v = matrix.to_arrays()
    assert out_x.dtype == np.int64
    assert out_y.dtype == np.int64
    triples = set(zip(out_x.tolist(), out_y.tolist(), out_v))
    assert triples == set(zip(xs.tolist(), ys.tolist(), values))


def test_to_arrays_empty():
    xs, ys, values = SparseMatrix().to_arrays()
    assert len(xs) == 0
    assert len(ys) == 0
    assert values == []


def test_dataframe_round_trip(cells):
    xs, ys, values = cells
    df = pd.DataFrame({'x': xs, 'y': ys, 'value': values})
    matrix = SparseMatrix.from_dataframe(df)
    out = matrix.to_dataframe()
    assert list(out.columns) == ['x', 'y', 'value']
    assert len(out) == 4
    merged = out.sort_values(['x', 'y']).reset_index(drop=True)
    expected = df.sort_values(['x', 'y']).reset_index(drop=True)
    assert merged['x'].tolist() == expected['x'].tolist()
    assert merged['y'].tolist() == expected['y'].tolist()
    assert merged['value'].tolist() == expected['value'].tolist()


def test_from_dataframe_custom_columns():
    df = pd.DataFrame({'row': [2, 3], 'col': [4, 5], 'score': [0.5, 0.25]})
    matrix = SparseMatrix.from_dataframe(df, x_col='row', y_col='col', value_col='score')
    assert matrix.get(2, 4) == 0.5
    assert matrix.get_elements_in_col(5) == [0.25]


def test_from_dataframe_missing_column():
    df = pd.DataFrame({'x': [1], 'y': [1]})
    with pytest.raises(MissingColumnError) as exc_info:
        SparseMatrix.from_dataframe(df)
    assert exc_info.value.column == 'value'
    assert exc_info.value.available == ['x', 'y']


def test_to_dataframe_empty():
    df = SparseMatrix().to_dataframe()
    assert list(df.columns) == ['x', 'y', 'value']
    assert len(df) == 0


def test_from_arrays_rejects_fractional_coordinates():
    with pytest.raises(InvalidCoordinateValueError) as exc_info:
        SparseMatrix.from_arrays([0.9, 0.2], [0, 0], ["a", "b"])
    assert exc_info.value.axis == 'xs'
    assert exc_info.value.bad_values == [0.9, 0.2]


def test_from_arrays_rejects_bad_column_axis():
    with pytest.raises(InvalidCoordinateValueError) as exc_info:
        SparseMatrix.from_arrays([0, 1], np.array([1.0, np.inf]), ["a", "b"])
    assert exc_info.value.axis == 'ys'


@pytest.mark.parametrize("xs", [
    [True, False],
    ["1", "2"],
    [1, None],
])
def test_from_arrays_rejects_non_numeric_coordinates(xs):
    with pytest.raises(InvalidCoordinateValueError):
        SparseMatrix.from_arrays(xs, [0, 1], ["a", "b"])


def test_from_arrays_accepts_integral_floats():
    matrix = SparseMatrix.from_arrays(np.array([1.0, -2.0]), [3, 4], ["a", "b"])
    assert matrix.get(1, 3) == "a"
    assert matrix.get(-2, 4) == "b"
    assert all(type(x) is int for x in matrix.occupied_rows())


def test_from_dataframe_rejects_nan_coordinate():
    df = pd.DataFrame({'x': [1.0, np.nan], 'y': [0, 1], 'value': ["a", "b"]})
    with pytest.raises(SparseMatrixInputError) as exc_info:
        SparseMatrix.from_dataframe(df)
    assert isinstance(exc_info.value, InvalidCoordinateValueError)
    assert exc_info.value.axis == 'xs'
    assert len(exc_info.value.bad_values) == 1


def test_export_coordinates_outside_int64():
    matrix = SparseMatrix()
    matrix.put(2**70, 0, "big")
    matrix.put(-(2**65), 1, "small")
    xs, ys, values = matrix.to_arrays()
    assert xs.dtype == object
    assert ys.dtype == np.int64
    assert set(zip(xs.tolist(), ys.tolist(), values)) == {(2**70, 0, "big"), (-(2**65), 1, "small")}

    df = matrix.to_dataframe()
    assert len(df) == 2
    restored = SparseMatrix.from_dataframe(df)
    assert restored.get(2**70, 0) == "big"
    assert restored.get(-(2**65), 1) == "small"
    validate_views(restored)
