"""Procedural wasp nest generation."""

__version__ = "0.1.0"
