"""Character, memory, string, linked-list, output, line-reading and printf-style formatting utilities."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "strings",
    "linkedlist",
    "output",
    "lines",
    "spec",
    "integers",
    "floats",
    "formatter",
]