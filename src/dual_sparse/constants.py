
class SizeMode:
    ROWS = "rows"  # count occupied row indices
    ELEMENTS = "elements"  # count populated coordinates

    ALL = [ROWS, ELEMENTS]


# exponentially spaced diagonal used by the demo driver
DEMO_COORDINATES = [0, 1_000, 100_000, 1_000_000, 10_000_000, 100_000_000]

class DataFrameColumn:
    X = "x"
    Y = "y"
    VALUE = "value"
