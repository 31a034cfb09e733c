from typing import Optional, List, Literal
from dataclasses import dataclass, field

from .constants import SizeMode, DEMO_COORDINATES
from .sparse_errors import InvalidSizeModeError, EmptyDemoCoordinatesError


@dataclass
class SparseMatrixConfig:
    """
    Configuration for a SparseMatrix instance.
    """

    size_mode: Literal['rows', 'elements'] = 'rows'
    """What get_size() counts:
    - 'rows': number of occupied row indices (the historical behavior)
    - 'elements': number of populated coordinates, same as len()
    """

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.size_mode not in SizeMode.ALL:
            raise InvalidSizeModeError(self.size_mode, SizeMode.ALL)


@dataclass
class DemoConfig:
    """
    Configuration for the demonstration driver.

    Each coordinate c is inserted on the diagonal as put(c, c, c).
    """

    coordinates: List[int] = field(default_factory=lambda: list(DEMO_COORDINATES))
    """Diagonal coordinates to populate, in insertion order."""

    remove_coordinate: Optional[int] = None
    """Diagonal cell removed after the first round of queries. If None, the last coordinate is used."""

    query_row: int = 0
    """Row printed before the removal."""

    query_col: int = 0
    """Column printed before the removal."""

    size_mode: Literal['rows', 'elements'] = 'rows'
    """Forwarded to SparseMatrixConfig.size_mode."""

    def matrix_config(self) -> SparseMatrixConfig:
        return SparseMatrixConfig(size_mode=self.size_mode)

    def validate(self) -> None:
        """Validate configuration parameters."""
        if len(self.coordinates) == 0:
            raise EmptyDemoCoordinatesError()
        self.matrix_config().validate()
