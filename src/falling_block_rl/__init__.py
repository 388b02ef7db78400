"""Falling block puzzle engine with pygame play and a gymnasium environment."""

__version__ = "0.1.0"
