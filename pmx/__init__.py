"""Manage Markdown prompt profiles and apply them to coding agents."""

__version__ = "0.1.0"