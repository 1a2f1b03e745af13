"""Computational backends for column-wise statistics."""

from pycolstats.columnwise.backends.cpu import CPUColumnBackend

__all__ = ["CPUColumnBackend"]
