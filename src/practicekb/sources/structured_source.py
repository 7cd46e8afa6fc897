"""Source for structured practice definitions in JSON or YAML files."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from practicekb.core import DEFAULT_LANGUAGE, Category, Document, Practice, Severity
from practicekb.extraction import (
    format_structured_practice_content,
    format_style_guide_overview,
    overview_document,
    practice_document,
)
from .base import PracticeSource
from .config import SourceConfig

logger = logging.getLogger(__name__)

YAML_PATTERNS = ["**/*.yaml", "**/*.yml"]
JSON_PATTERNS = ["**/*.json"]


class PracticeModel(BaseModel):
    """Schema for a single practice in a structured file."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    category: Category
    severity: Severity = "suggestion"
    language: str | None = None
    framework: str | None = None
    good_example: str | None = Field(default=None, alias="goodExample")
    bad_example: str | None = Field(default=None, alias="badExample")
    rationale: str | None = None
    exceptions: list[str] = Field(default_factory=list)
    related_practices: list[str] = Field(default_factory=list, alias="relatedPractices")
    lint_rules: list[str] = Field(default_factory=list, alias="lintRules")
    references: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    def to_practice(self, language: str | None = None, framework: str | None = None) -> Practice:
        """Convert to a Practice, filling language/framework from defaults."""
        return Practice(
            id=self.id,
            title=self.title,
            description=self.description,
            category=self.category,
            severity=self.severity,
            language=self.language or language or DEFAULT_LANGUAGE,
            framework=self.framework or framework,
            good_example=self.good_example or None,
            bad_example=self.bad_example or None,
            rationale=self.rationale or None,
            lint_rules=list(dict.fromkeys(self.lint_rules)),
            tags=list(dict.fromkeys(t.lower() for t in self.tags)),
            exceptions=self.exceptions,
            related_practices=self.related_practices,
            references=self.references,
        )


class StyleGuideModel(BaseModel):
    """Schema for a style guide: shared settings plus a list of practices."""

    name: str
    version: str | None = None
    language: str
    framework: str | None = None
    description: str | None = None
    practices: list[PracticeModel]
    metadata: dict[str, Any] | None = None


def parse_structured(text: str, suffix: str) -> Any:
    """Parse file text as YAML or JSON depending on the file suffix."""
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return json.loads(text)


class StructuredPracticeSource(PracticeSource):
    """Loads practices from YAML or JSON files validated against the schemas above.

    A file may hold a style guide, a list of practices or a single practice.
    Files that fail to parse or match none of these shapes are skipped with a
    warning.
    """

    kind = "structured practices"

    def __init__(self, config: SourceConfig, workers: int = 4):
        super().__init__(config, workers)
        self.patterns = YAML_PATTERNS if config.format == "yaml" else JSON_PATTERNS

    def load_file(self, file_path: Path, relative_path: str) -> list[Document]:
        text = file_path.read_text(encoding="utf-8")
        try:
            data = parse_structured(text, file_path.suffix.lower())
        except (yaml.YAMLError, json.JSONDecodeError, RecursionError) as e:
            logger.warning(f"Failed to parse {file_path}: {e}")
            return []

        try:
            guide = StyleGuideModel.model_validate(data)
        except ValidationError:
            guide = None
        if guide is not None:
            return self._style_guide_documents(guide, relative_path)

        if isinstance(data, list):
            practices = []
            for item in data:
                try:
                    practices.append(PracticeModel.model_validate(item).to_practice(*self._defaults()))
                except ValidationError as e:
                    logger.warning(f"Skipping invalid practice in {file_path}: {e.error_count()} errors")
            if practices:
                return self._practice_documents(practices, relative_path)

        try:
            single = PracticeModel.model_validate(data)
        except ValidationError:
            single = None
        if single is not None:
            return self._practice_documents([single.to_practice(*self._defaults())], relative_path)

        logger.warning(f"Unknown file format: {file_path}")
        return []

    def _defaults(self) -> tuple[str | None, str | None]:
        return self.config.language, self.config.framework

    def _practice_documents(self, practices: list[Practice], relative_path: str) -> list[Document]:
        return [
            practice_document(
                practice,
                self.name,
                relative_path,
                content=format_structured_practice_content(practice),
                extra_metadata={"relatedPractices": list(practice.related_practices)},
            )
            for practice in practices
        ]

    def _style_guide_documents(self, guide: StyleGuideModel, relative_path: str) -> list[Document]:
        practices = [p.to_practice(guide.language, guide.framework) for p in guide.practices]
        documents = self._practice_documents(practices, relative_path)

        documents.append(overview_document(
            self.name,
            relative_path,
            title=guide.name,
            content=format_style_guide_overview(
                guide.name,
                guide.language,
                practices,
                framework=guide.framework,
                version=guide.version,
                description=guide.description,
            ),
            practices=practices,
            language=guide.language,
            framework=guide.framework,
            extra_metadata={"version": guide.version},
        ))
        return documents
