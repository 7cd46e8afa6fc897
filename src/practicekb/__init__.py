"""Coding-standard practices knowledge base."""

__version__ = "0.1.0"
