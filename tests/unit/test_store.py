"""Unit tests for the in-memory document store."""

import pytest

from practicekb.core import Document
from practicekb.search import DocumentStore, tokenize


def doc(doc_id, title, content, **metadata):
    return Document(id=doc_id, type="practice", title=title, content=content, metadata=metadata)


@pytest.fixture
def store():
    store = DocumentStore(max_results=10, min_score=0.3)
    store.add([
        doc("a", "Use const", "Prefer const over let for bindings.", language="javascript",
            tags=["js"], lintRules=["prefer-const"]),
        doc("b", "Avoid any", "Do not use the any type.", language="typescript", tags=["ts"]),
        doc("c", "Name tests clearly", "Test names describe behaviour.", language="general"),
    ])
    return store


class TestTokenize:
    def test_lowercase_alphanumeric(self):
        assert tokenize("Prefer `const`, NOT let!") == ["prefer", "const", "not", "let"]


class TestDocumentStore:
    """Tests for DocumentStore."""

    def test_get_and_all(self, store):
        assert store.get("b").title == "Avoid any"
        assert store.get("missing") is None
        assert [d.id for d in store.all()] == ["a", "b", "c"]
        assert len(store) == 3

    def test_add_replaces_same_id(self, store):
        store.add([doc("a", "Replaced", "New content.")])
        assert store.get("a").title == "Replaced"
        assert len(store) == 3

    def test_filter(self, store):
        found = store.filter(lambda d: d.metadata.get("language") == "typescript")
        assert [d.id for d in found] == ["b"]

    def test_search_ranks_title_match_first(self, store):
        results = store.search("use const")
        assert results[0].document.id == "a"
        assert results[0].score == 1.0

    def test_search_min_score(self, store):
        assert store.search("kubernetes helm charts") == []

    def test_search_lint_rule_boost(self, store):
        results = store.search("prefer-const", min_score=0.0)
        assert results[0].document.id == "a"

    def test_search_filters(self, store):
        results = store.search("use", filters={"language": "typescript"}, min_score=0.0)
        assert [r.document.id for r in results] == ["b"]

    def test_search_limit(self, store):
        results = store.search("use test avoid const", limit=1, min_score=0.0)
        assert len(results) == 1

    def test_empty_query(self, store):
        assert store.search("   ", min_score=0.0) == []

    def test_scores_bounded(self, store):
        for result in store.search("use const js prefer-const", min_score=0.0):
            assert 0.0 <= result.score <= 1.0

    def test_clear(self, store):
        store.clear()
        assert store.all() == []
