"""Render practices into indexable Documents."""

from practicekb.core import DEFAULT_LANGUAGE, Document, Practice

PRACTICE_TYPE = "practice"
OVERVIEW_TYPE = "style-guide"
OVERVIEW_SNIPPET_CHARS = 100


def practice_document_id(source_name: str, relative_path: str, practice_id: str) -> str:
    return f"{source_name}:{relative_path}#{practice_id}"


def overview_document_id(source_name: str, relative_path: str) -> str:
    return f"{source_name}:{relative_path}"


def _fenced(code: str) -> list[str]:
    return ["```", code, "```"]


def format_practice_content(practice: Practice) -> str:
    """Format a markdown-sourced practice into searchable content."""
    parts = [f"# {practice.title}", "", practice.description]

    if practice.rationale:
        parts += ["", "## Rationale", practice.rationale]
    if practice.good_example:
        parts += ["", "## Good Example", *_fenced(practice.good_example)]
    if practice.bad_example:
        parts += ["", "## Bad Example", *_fenced(practice.bad_example)]
    if practice.lint_rules:
        parts += ["", "## Related Lint Rules", ", ".join(practice.lint_rules)]

    return "\n".join(parts)


def format_structured_practice_content(practice: Practice) -> str:
    """Format a structured (YAML/JSON) practice, which carries more fields."""
    parts = [
        f"# {practice.title}",
        "",
        f"**Category:** {practice.category}",
        f"**Severity:** {practice.severity}",
        f"**Language:** {practice.language}",
        "",
        practice.description,
    ]

    if practice.rationale:
        parts += ["", "## Rationale", practice.rationale]
    if practice.good_example:
        parts += ["", "## Good Example", *_fenced(practice.good_example)]
    if practice.bad_example:
        parts += ["", "## Bad Example (Avoid)", *_fenced(practice.bad_example)]
    if practice.exceptions:
        parts += ["", "## Exceptions", "\n".join(f"- {e}" for e in practice.exceptions)]
    if practice.lint_rules:
        parts += ["", "## Related Lint Rules", "\n".join(f"- {r}" for r in practice.lint_rules)]
    if practice.references:
        parts += ["", "## References", "\n".join(f"- {r}" for r in practice.references)]

    return "\n".join(parts)


def format_style_guide_overview(
    name: str,
    language: str,
    practices: list[Practice],
    framework: str | None = None,
    version: str | None = None,
    description: str | None = None,
) -> str:
    """Format a structured style guide overview, grouping practices by category."""
    parts = [f"# {name}", "", f"**Language:** {language}"]

    if framework:
        parts.append(f"**Framework:** {framework}")
    if version:
        parts.append(f"**Version:** {version}")
    if description:
        parts += ["", description]

    parts += ["", "## Practices", ""]

    by_category: dict[str, list[Practice]] = {}
    for practice in practices:
        by_category.setdefault(practice.category, []).append(practice)

    for category, grouped in by_category.items():
        parts += [f"### {category}", ""]
        for p in grouped:
            snippet = p.description[:OVERVIEW_SNIPPET_CHARS]
            parts.append(f"- **{p.title}** [{p.severity}]: {snippet}...")
        parts.append("")

    return "\n".join(parts)


def distinct_categories(practices: list[Practice]) -> list[str]:
    """Categories present in the practices, in first-seen order."""
    return list(dict.fromkeys(p.category for p in practices))


def practice_document(
    practice: Practice,
    source_name: str,
    relative_path: str,
    content: str | None = None,
    extra_metadata: dict | None = None,
) -> Document:
    """Wrap a Practice in a Document with the metadata used for filtering."""
    metadata = {
        "source": source_name,
        "path": relative_path,
        "practiceId": practice.id,
        "category": practice.category,
        "severity": practice.severity,
        "language": practice.language or DEFAULT_LANGUAGE,
        "framework": practice.framework,
        "tags": list(practice.tags),
        "hasGoodExample": bool(practice.good_example),
        "hasBadExample": bool(practice.bad_example),
        "lintRules": list(practice.lint_rules),
    }
    if extra_metadata:
        metadata.update(extra_metadata)

    return Document(
        id=practice_document_id(source_name, relative_path, practice.id),
        type=PRACTICE_TYPE,
        title=practice.title,
        content=content if content is not None else format_practice_content(practice),
        metadata=metadata,
    )


def overview_document(
    source_name: str,
    relative_path: str,
    title: str,
    content: str,
    practices: list[Practice],
    language: str | None = None,
    framework: str | None = None,
    extra_metadata: dict | None = None,
) -> Document:
    """Build the whole-file overview Document that accompanies a file's practices."""
    metadata = {
        "source": source_name,
        "path": relative_path,
        "language": language or DEFAULT_LANGUAGE,
        "framework": framework,
        "practiceCount": len(practices),
        "categories": distinct_categories(practices),
    }
    if extra_metadata:
        metadata.update(extra_metadata)

    return Document(
        id=overview_document_id(source_name, relative_path),
        type=OVERVIEW_TYPE,
        title=title,
        content=content,
        metadata=metadata,
    )
