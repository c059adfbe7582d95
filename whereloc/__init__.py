"""Locate the binary, source and manual page files for a command."""

__version__ = "0.0.1"