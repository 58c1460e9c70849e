"""Mob programming session starter."""

__version__ = "0.1.0"
