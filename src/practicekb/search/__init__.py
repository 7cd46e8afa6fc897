"""Document storage and keyword search."""

from .store import DocumentStore, SearchResult, tokenize

__all__ = ["DocumentStore", "SearchResult", "tokenize"]
