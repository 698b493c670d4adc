"""I/O utilities for reading and writing collection files."""

from . import readers
from . import writers

__all__ = ["readers", "writers"]
