

class SparseMatrixConfigError(ValueError):
    """Base class for sparse matrix configuration errors."""
    pass

class SparseMatrixKeyError(KeyError):
    """Base class for sparse matrix key errors raised by the mapping protocol."""
    pass

class SparseMatrixInputError(ValueError):
    """Base class for errors in bulk construction inputs."""
    pass



class InvalidSizeModeError(SparseMatrixConfigError):
    """Raised when an invalid size mode is provided."""

    def __init__(self, mode: str, valid_modes: list):
        self.mode = mode
        self.valid_modes = valid_modes
        message = f"Invalid size mode '{mode}'. Must be one of: {valid_modes}"
        super().__init__(message)


class EmptyDemoCoordinatesError(SparseMatrixConfigError):
    """Raised when the demo coordinates list is empty."""

    def __init__(self):
        message = "Demo coordinates list cannot be empty"
        super().__init__(message)


class InvalidCoordinateKeyError(SparseMatrixKeyError):
    """Raised when a matrix key is not an (x, y) tuple."""

    def __init__(self, key):
        self.key = key
        message = f"SparseMatrix indices must be a tuple of length 2, got {key!r}"
        super().__init__(message)


class CoordinateNotFoundError(SparseMatrixKeyError):
    """Raised by item access when no element is stored at (x, y)."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        message = f"No element stored at ({x}, {y})"
        super().__init__(message)


class ShapeMismatchError(SparseMatrixInputError):
    """Raised when coordinate and value arrays differ in length."""

    def __init__(self, lengths: dict):
        self.lengths = lengths
        message = f"xs, ys and values must have the same length, got: {lengths}"
        super().__init__(message)


class MissingColumnError(SparseMatrixInputError):
    """Raised when a required column is absent from an input DataFrame."""

    def __init__(self, column: str, available: list):
        self.column = column
        self.available = available
        message = f'Column "{column}" not found in DataFrame. Available columns: {available}'
        super().__init__(message)


class InvalidCoordinateValueError(SparseMatrixInputError):
    """Raised when a bulk coordinate is not an integer (floats with a fraction, NaN, inf, strings, bools)."""

    def __init__(self, axis: str, bad_values: list):
        self.axis = axis
        self.bad_values = bad_values
        message = f"{axis} must hold integer coordinates, got non-integer values: {bad_values[:5]}"
        super().__init__(message)
