"""Study-partner matching by shared courses and study preferences."""

__version__ = "0.1.0"
__all__ = ["__version__"]