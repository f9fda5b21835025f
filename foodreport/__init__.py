"""Read a food inventory file and report vegetables, fruit and dairy items."""

__version__ = "0.1.0"
__all__ = ["__version__"]