"""Load, compile and check small exercises, write editor project files, and provide worked solutions."""

__version__ = "0.1.0"