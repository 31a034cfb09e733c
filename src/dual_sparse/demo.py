"""
Demonstration driver: fills a SparseMatrix along an exponentially spaced
diagonal, queries it, removes one cell and queries it again.
"""
import time
from typing import Optional

from .config import DemoConfig
from .sparse_matrix import SparseMatrix


def run_demo(config: Optional[DemoConfig] = None) -> dict:
    """
    Run the demonstration and print each query result.

    Args:
        config: DemoConfig describing the coordinates and queries. Defaults to DemoConfig().

    Returns:
        Dictionary with the query results before and after the removal.
    """
    if config is None:
        config = DemoConfig()
    config.validate()

    print("=== SparseMatrix demo ===")
    start_time = time.time()

    matrix = SparseMatrix(config=config.matrix_config())
    for c in config.coordinates:
        matrix.put(c, c, c)
    print(f"Inserted {len(config.coordinates)} diagonal elements")

    results = {
        'before_all': matrix.get_all_elements(),
        'before_row': matrix.get_elements_in_row(config.query_row),
        'before_col': matrix.get_elements_in_col(config.query_col),
        'before_size': matrix.get_size(),
    }
    print(results['before_all'])
    print(results['before_row'])
    print(results['before_col'])
    print(results['before_size'])

    removed = config.remove_coordinate if config.remove_coordinate is not None else config.coordinates[-1]
    print(f"Removing ({removed}, {removed})")
    matrix.remove(removed, removed)

    results['after_all'] = matrix.get_all_elements()
    results['after_row'] = matrix.get_elements_in_row(removed)
    results['after_col'] = matrix.get_elements_in_col(removed)
    results['after_size'] = matrix.get_size()
    print(results['after_all'])
    print(results['after_row'])
    print(results['after_col'])
    print(results['after_size'])

    print(f"  took: {time.time() - start_time} seconds")
    return results


def main():
    run_demo(DemoConfig())


if __name__ == "__main__":
    main()
