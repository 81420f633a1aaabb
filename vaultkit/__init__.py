"""Pure-Python SHA-1, SHA-3 and AES, with small data structures and console helpers."""

__version__ = "0.1.0"