"""Classic array, string, matrix, binary-tree and search algorithms."""

__version__ = "0.1.0"
__all__ = [
    "answer_search",
    "counting",
    "inplace",
    "intervals",
    "matrix",
    "monotonic",
    "searching",
    "stacks",
    "sums",
    "text",
    "trees",
]