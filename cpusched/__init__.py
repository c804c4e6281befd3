"""Discrete-time simulation of CPU scheduling policies over small programs."""

__version__ = "0.1.0"
__all__ = ["__version__"]