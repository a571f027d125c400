"""Humanizer: score AI-written text, rewrite it, and compare the results."""

__version__ = "0.1.0"
