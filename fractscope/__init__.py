"""Interactive explorer and rendering helpers for escape-time fractals."""

__version__ = "0.1.0"
__all__ = ["__version__"]