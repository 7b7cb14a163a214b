"""Classic array, interval, matrix and counting algorithms for plain Python lists."""

__version__ = "0.1.0"

__all__ = [
    "combinatorics",
    "counting",
    "intervals",
    "matrix",
    "permutations",
    "sorting",
    "stocks",
    "sums",
]