"""Classic data structures and algorithms: linked lists, stacks, queues, graphs, digit arithmetic and polynomials."""

__version__ = "0.1.0"

__all__ = [
    "bignum",
    "dlist",
    "expressions",
    "linked",
    "mst",
    "polynomial",
    "shortest",
    "stackqueue",
    "traversal",
    "weighted",
]