"""judo: keyboard-driven todo lists in the terminal."""

__version__ = "0.3.0"
