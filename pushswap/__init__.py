"""Parse and validate a list of distinct integers from command-line arguments."""

__version__ = "0.1.0"
__all__ = ["__version__"]