import os
import sys

# Add the src directory to Python path to import local dual_sparse
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


from dual_sparse import SparseMatrix, DemoConfig, run_demo



def negative_quadrant_demo():
    """Same queries as the default demo, on coordinates below zero."""
    config = DemoConfig(coordinates=[-1, -1_000, -1_000_000], query_row=-1, query_col=-1)
    run_demo(config)


def bulk_load_demo():
    matrix = SparseMatrix.from_arrays([0, 0, 5], [0, 9, 9], ["a", "b", "c"])
    print(matrix)
    print(matrix.to_dataframe())
    print(f"row 0: {matrix.get_row(0)}")
    print(f"col 9: {matrix.get_col(9)}")


if __name__ == "__main__":

    run_demo(DemoConfig())
    negative_quadrant_demo()
    bulk_load_demo()
