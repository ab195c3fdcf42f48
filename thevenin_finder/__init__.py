"""Thevenin equivalent circuit finder: resistor expressions, load power analysis and an interactive command."""

__version__ = "1.0.0"
__all__ = ["__version__"]