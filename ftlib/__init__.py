"""C-library-style character, memory, string, linked-list, output and printf helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "linked", "output", "printf"]