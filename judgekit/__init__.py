"""Solutions to classic online-judge problems as plain Python functions."""

__version__ = "0.1.0"