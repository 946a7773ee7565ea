"""Forgetful Me: a simple task reminder for the terminal."""

__version__ = "0.3.0"
