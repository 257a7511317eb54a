"""Classic algorithm solutions for linked lists, trees, containers, dynamic programming, strings, arithmetic, arrays and graphs."""

__version__ = "0.1.0"
__all__ = [
    "arithmetic",
    "arrays",
    "containers",
    "dp",
    "graphs",
    "linkedlist",
    "strings",
    "trees",
]