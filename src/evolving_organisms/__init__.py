"""Evolving Organisms - genome-driven square-bodied organisms."""

__version__ = "0.1.0"
