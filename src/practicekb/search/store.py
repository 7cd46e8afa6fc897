"""In-memory document store with keyword relevance search."""

import re
from dataclasses import dataclass
from typing import Callable, Iterable

from practicekb.core import Document

# Score boosts for exact matches
TITLE_MATCH_BOOST = 0.3
TAG_MATCH_BOOST = 0.2

DEFAULT_MAX_RESULTS = 10
DEFAULT_MIN_SCORE = 0.3


def tokenize(text: str) -> list[str]:
    """Lowercase alphanumeric tokens of a text."""
    return re.findall(r"[a-z0-9]+", text.lower())


@dataclass
class SearchResult:
    """A document with its relevance score (0.0 - 1.0)."""
    document: Document
    score: float


class DocumentStore:
    """Holds Documents by id and answers filtered keyword searches.

    Scores are deterministic: the fraction of query terms present in the
    document title and content, plus boosts for a title match and for a query
    term naming one of the document's tags or lint rules.
    """

    def __init__(self, max_results: int = DEFAULT_MAX_RESULTS, min_score: float = DEFAULT_MIN_SCORE):
        self.max_results = max_results
        self.min_score = min_score
        self._documents: dict[str, Document] = {}
        self._tokens: dict[str, set[str]] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def add(self, documents: Iterable[Document]) -> None:
        """Add documents; a document with an existing id replaces the old one."""
        for doc in documents:
            self._documents[doc.id] = doc
            self._tokens[doc.id] = set(tokenize(f"{doc.title} {doc.content}"))

    def clear(self) -> None:
        self._documents.clear()
        self._tokens.clear()

    def get(self, document_id: str) -> Document | None:
        return self._documents.get(document_id)

    def all(self) -> list[Document]:
        return list(self._documents.values())

    def filter(self, predicate: Callable[[Document], bool]) -> list[Document]:
        return [doc for doc in self._documents.values() if predicate(doc)]

    def score(self, document: Document, terms: list[str], query: str) -> float:
        """Relevance of one document to the query terms."""
        if not terms:
            return 0.0

        tokens = self._tokens.get(document.id)
        if tokens is None:
            tokens = set(tokenize(f"{document.title} {document.content}"))

        score = sum(1 for term in terms if term in tokens) / len(terms)

        title = document.title.lower().strip()
        normalized_query = query.lower().strip()
        if title and (title in normalized_query or normalized_query in title):
            score += TITLE_MATCH_BOOST

        labels = {
            str(label).lower()
            for key in ("tags", "lintRules")
            for label in document.metadata.get(key) or []
        }
        if labels and (normalized_query in labels or any(term in labels for term in terms)):
            score += TAG_MATCH_BOOST

        return min(score, 1.0)

    def search(
        self,
        query: str,
        filters: dict | None = None,
        limit: int | None = None,
        min_score: float | None = None,
    ) -> list[SearchResult]:
        """Search documents by keyword relevance.

        Args:
            query: Free-text query
            filters: Metadata keys that must equal the given values
            limit: Maximum results (defaults to max_results)
            min_score: Drop results scoring below this (defaults to min_score)

        Returns:
            Results sorted by score, ties kept in insertion order
        """
        terms = list(dict.fromkeys(tokenize(query)))
        limit = limit if limit is not None else self.max_results
        threshold = min_score if min_score is not None else self.min_score

        results = []
        for doc in self._documents.values():
            if filters and any(doc.metadata.get(k) != v for k, v in filters.items()):
                continue
            score = self.score(doc, terms, query)
            if score > 0 and score >= threshold:
                results.append(SearchResult(document=doc, score=score))

        results.sort(key=lambda r: r.score, reverse=True)
        return results[:limit]
