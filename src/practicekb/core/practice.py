"""Practice and Document dataclasses."""

from dataclasses import dataclass, field
from typing import Any, Literal

Category = Literal[
    "naming",
    "formatting",
    "architecture",
    "testing",
    "security",
    "performance",
    "documentation",
    "error-handling",
    "logging",
    "dependency-management",
    "general",
]

# error: must follow, warning: should follow, suggestion: could follow,
# info: context only
Severity = Literal["error", "warning", "suggestion", "info"]

CATEGORIES: tuple[str, ...] = (
    "naming",
    "formatting",
    "architecture",
    "testing",
    "security",
    "performance",
    "documentation",
    "error-handling",
    "logging",
    "dependency-management",
    "general",
)
SEVERITIES: tuple[str, ...] = ("error", "warning", "suggestion", "info")

DEFAULT_CATEGORY = "general"
DEFAULT_SEVERITY = "suggestion"
DEFAULT_LANGUAGE = "general"


@dataclass
class Practice:
    """A single classified coding-standard recommendation."""
    id: str
    title: str
    description: str
    category: str = DEFAULT_CATEGORY
    severity: str = DEFAULT_SEVERITY
    language: str = DEFAULT_LANGUAGE
    framework: str | None = None
    good_example: str | None = None
    bad_example: str | None = None
    rationale: str | None = None
    lint_rules: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    exceptions: list[str] = field(default_factory=list)
    related_practices: list[str] = field(default_factory=list)
    references: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"Practice(id={self.id!r}, title={self.title!r}, "
            f"category={self.category!r}, severity={self.severity!r})"
        )


@dataclass
class Document:
    """An indexable record produced from a practice or a whole file."""
    id: str
    type: str
    title: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        content_preview = self.content[:100] + "..." if len(self.content) > 100 else self.content
        return f"Document(id={self.id!r}, type={self.type!r}, content={content_preview!r})"
