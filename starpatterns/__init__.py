"""Console number, letter and star patterns, a multiplication table, and a menu command."""

__version__ = "0.1.0"
__all__ = ["__version__"]