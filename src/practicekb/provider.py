"""Best practices provider: loads all sources and answers practice queries."""

import logging
import re
from dataclasses import dataclass, field
from pydantic import BaseModel, Field

from practicekb.core import DEFAULT_LANGUAGE, Category, Document, Severity
from practicekb.extraction import PRACTICE_TYPE
from practicekb.search import DocumentStore, SearchResult
from practicekb.sources import (
    MarkdownPracticeSource,
    PracticeSource,
    ProviderConfig,
    SourceConfig,
    StructuredPracticeSource,
)

logger = logging.getLogger(__name__)

GOOD_EXAMPLE_RE = re.compile(r"## Good Example\s*```[\w]*\n(.*?)```", re.DOTALL)
BAD_EXAMPLE_RE = re.compile(r"## Bad Example[^\n]*\s*```[\w]*\n(.*?)```", re.DOTALL)


class PracticeQuery(BaseModel):
    """Query for best practices."""

    query: str = Field(..., min_length=1, description="Search query")
    category: Category | None = Field(default=None, description="Filter by practice category")
    language: str | None = Field(default=None, description="Filter by programming language")
    framework: str | None = Field(default=None, description="Filter by framework")
    severity: Severity | None = Field(default=None, description="Filter by severity level")
    limit: int | None = Field(default=None, ge=1, description="Maximum results")


@dataclass
class SyncReport:
    """Outcome of loading all sources."""
    documents: int = 0
    failed_sources: dict[str, str] = field(default_factory=dict)


def create_source(config: SourceConfig, workers: int = 4) -> PracticeSource:
    """Build the source matching a registration's format."""
    if config.type != "local":
        logger.warning(f"Source '{config.name}' has type '{config.type}'; reading {config.path} as a local directory")
    if config.format in ("json", "yaml"):
        return StructuredPracticeSource(config, workers)
    if config.format != "markdown":
        logger.warning(f"Unknown format for source '{config.name}', defaulting to markdown")
    return MarkdownPracticeSource(config, workers)


def _matches_language(doc: Document, language: str | None) -> bool:
    if not language:
        return True
    return doc.metadata.get("language") in (language, DEFAULT_LANGUAGE)


class BestPracticesProvider:
    """Searches coding standards across every registered source.

    Supports markdown and structured (JSON/YAML) sources, filtering by
    category, language, framework and severity, and returns practices with
    their code examples.
    """

    def __init__(self, config: ProviderConfig, store: DocumentStore | None = None):
        self.config = config
        self.store = store or DocumentStore(max_results=config.max_results, min_score=config.min_score)
        self.sources = [create_source(source, config.workers) for source in config.sources]

    def sync(self) -> SyncReport:
        """Reload every source into the store.

        A source whose root is missing or unreadable is reported and skipped;
        the remaining sources still load.
        """
        report = SyncReport()
        self.store.clear()

        for source in self.sources:
            try:
                source.connect()
                documents = source.fetch_documents()
            except OSError as e:
                logger.error(f"Failed to load source '{source.name}': {e}")
                report.failed_sources[source.name] = str(e)
                continue
            self.store.add(documents)
            report.documents += len(documents)

        logger.info(f"Synced {report.documents} documents from {len(self.sources)} sources")
        return report

    def search_practices(self, query: PracticeQuery) -> list[SearchResult]:
        """Search practices, then narrow by category, severity and framework."""
        filters = {"language": query.language} if query.language else None
        results = self.store.search(
            query.query,
            filters=filters,
            limit=query.limit or self.config.max_results,
        )

        def keep(result: SearchResult) -> bool:
            meta = result.document.metadata
            if query.category and meta.get("category") != query.category:
                return False
            if query.severity and meta.get("severity") != query.severity:
                return False
            if query.framework and meta.get("framework") != query.framework:
                return False
            return True

        return [r for r in results if keep(r)]

    def get_practices_by_category(
        self,
        category: str,
        language: str | None = None,
        severity: str | None = None,
        limit: int = 20,
    ) -> list[Document]:
        """Practices in a category. Language-agnostic practices match any language."""
        practices = self.store.filter(
            lambda doc: doc.type == PRACTICE_TYPE
            and doc.metadata.get("category") == category
            and _matches_language(doc, language)
            and (not severity or doc.metadata.get("severity") == severity)
        )
        return practices[:limit]

    def get_practices_for_lint_rule(self, rule_id: str) -> list[Document]:
        """Documents whose lint rules contain rule_id (case-insensitive)."""
        needle = rule_id.lower()
        return self.store.filter(
            lambda doc: any(needle in rule.lower() for rule in doc.metadata.get("lintRules") or [])
        )

    def get_examples(
        self,
        query: str,
        language: str | None = None,
        good_only: bool = False,
    ) -> list[dict]:
        """Code examples for practices matching the query."""
        results = self.search_practices(PracticeQuery(query=query, language=language, limit=10))

        examples = []
        for result in results:
            doc = result.document
            if not (doc.metadata.get("hasGoodExample") or doc.metadata.get("hasBadExample")):
                continue
            good_match = GOOD_EXAMPLE_RE.search(doc.content)
            bad_match = BAD_EXAMPLE_RE.search(doc.content)
            good = good_match.group(1).strip() if good_match else None
            bad = None if good_only or not bad_match else bad_match.group(1).strip()
            if good or bad:
                examples.append({
                    "practice": doc.title or doc.id,
                    "goodExample": good,
                    "badExample": bad,
                    "language": doc.metadata.get("language"),
                })
        return examples

    def list_categories(self, language: str | None = None) -> dict:
        """Practice counts per category, with per-severity counts."""
        practices = self.store.filter(
            lambda doc: doc.type == PRACTICE_TYPE and _matches_language(doc, language)
        )

        categories: dict[str, dict] = {}
        for doc in practices:
            entry = categories.setdefault(doc.metadata["category"], {"count": 0, "severities": {}})
            entry["count"] += 1
            severity = doc.metadata["severity"]
            entry["severities"][severity] = entry["severities"].get(severity, 0) + 1

        return {
            "categories": [{"name": name, **data} for name, data in categories.items()],
            "totalPractices": len(practices),
        }

    def get_practice(self, practice_id: str) -> dict | None:
        """Full view of one document by id, or None if unknown."""
        doc = self.store.get(practice_id)
        if doc is None:
            return None
        meta = doc.metadata
        return {
            "id": doc.id,
            "title": doc.title,
            "content": doc.content,
            "category": meta.get("category"),
            "severity": meta.get("severity"),
            "language": meta.get("language"),
            "framework": meta.get("framework"),
            "lintRules": meta.get("lintRules", []),
            "tags": meta.get("tags", []),
        }
