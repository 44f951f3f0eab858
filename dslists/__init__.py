"""Singly, doubly and circular linked lists, a polynomial type and a student roster demo."""

__version__ = "0.1.0"
__all__ = ["singly", "doubly", "circular", "polynomial", "students"]