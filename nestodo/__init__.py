"""nestodo - nested todo lists in the terminal."""

__version__ = "0.1.0"
