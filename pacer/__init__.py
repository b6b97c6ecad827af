"""Pacer - retirement contribution pacing tools."""

__version__ = "0.3.0"
