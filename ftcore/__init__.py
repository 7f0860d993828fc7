"""C-style character, memory, string, list, output, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "linkedlist", "output", "printf", "lines"]