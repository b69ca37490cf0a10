"""C-style string, memory, error-message, formatting and scanning utilities."""

__version__ = "0.1.0"
__all__ = ["cstring", "errnames", "formatting", "memory", "scanning", "text"]