"""taskpad: console front-end for a remote task list."""

__version__ = "0.1.0"
