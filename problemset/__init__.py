"""Solutions to introductory programming exercises, as functions and a command."""

__version__ = "0.1.0"