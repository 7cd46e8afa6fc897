"""Core domain models."""

from .practice import (
    CATEGORIES,
    Category,
    DEFAULT_CATEGORY,
    DEFAULT_LANGUAGE,
    DEFAULT_SEVERITY,
    SEVERITIES,
    Document,
    Practice,
    Severity,
)

__all__ = [
    "CATEGORIES",
    "Category",
    "DEFAULT_CATEGORY",
    "DEFAULT_LANGUAGE",
    "DEFAULT_SEVERITY",
    "SEVERITIES",
    "Document",
    "Practice",
    "Severity",
]
