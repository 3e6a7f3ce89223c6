"""Burrow - a sandboxed filesystem agent driven by a local language model."""

__version__ = "0.1.0"
