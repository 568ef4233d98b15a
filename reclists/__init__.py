"""Recursive lists of atoms: reading, writing and classic list operations."""

__version__ = "0.1.0"