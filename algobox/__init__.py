"""Algorithm routines for graphs, strings, arrays, dynamic programming and bitwise problems."""

__version__ = "0.1.0"