"""Classic algorithms and data structures: arrays, bits, searching, sorting,
graphs, mazes, expressions, queues, stacks, Tower of Hanoi and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "bounded_queue",
    "expressions",
    "graph",
    "greedy",
    "hanoi",
    "matrix",
    "maze",
    "searching",
    "sorting",
    "stacks",
    "trees",
]