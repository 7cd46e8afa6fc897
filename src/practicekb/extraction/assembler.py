"""Assemble Practice records from the sections of a markdown body."""

import re

from practicekb.core import DEFAULT_LANGUAGE, Practice
from .heuristics import (
    extract_description,
    extract_examples,
    extract_lint_rules,
    extract_rationale,
    extract_tags,
    infer_category,
    infer_severity,
)
from .segmenter import RawSection, iter_sections


def slugify(text: str) -> str:
    """Generate a URL-friendly slug: lowercase alphanumerics and single hyphens."""
    return re.sub(r'[^a-z0-9]+', '-', text.lower()).strip('-')


class SlugAllocator:
    """Hands out slugs that are unique within one file.

    A repeated slug gets a numeric suffix (``-2``, ``-3``, ...). A heading
    with no alphanumerics falls back to ``practice-<position>``.
    """

    def __init__(self):
        self._seen: set[str] = set()

    def allocate(self, heading: str, position: int) -> str:
        base = slugify(heading) or f"practice-{position}"
        slug = base
        suffix = 2
        while slug in self._seen:
            slug = f"{base}-{suffix}"
            suffix += 1
        self._seen.add(slug)
        return slug


def first_text(*values) -> str | None:
    """Return the first value that is a non-empty string after str()."""
    for value in values:
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def build_practice(
    section: RawSection,
    practice_id: str,
    front_matter: dict,
    defaults: dict | None = None,
) -> Practice:
    """Run every field heuristic over one section and merge the results.

    Language and framework come from front matter, then the source
    registration defaults, then the hard default.
    """
    defaults = defaults or {}
    good_example, bad_example = extract_examples(section.content)

    return Practice(
        id=practice_id,
        title=section.heading,
        description=extract_description(section.content),
        category=infer_category(section.heading, section.content, front_matter),
        severity=infer_severity(section.content, front_matter),
        language=first_text(
            front_matter.get("language"), defaults.get("language")
        ) or DEFAULT_LANGUAGE,
        framework=first_text(front_matter.get("framework"), defaults.get("framework")),
        good_example=good_example,
        bad_example=bad_example,
        rationale=extract_rationale(section.content),
        lint_rules=extract_lint_rules(section.content),
        tags=extract_tags(section.content, front_matter),
    )


def assemble_practices(
    body: str,
    front_matter: dict | None = None,
    defaults: dict | None = None,
) -> list[Practice]:
    """Turn every H2 section of a markdown body into a Practice.

    Args:
        body: Markdown body without front matter
        front_matter: Document-level metadata
        defaults: Source registration defaults (``language``, ``framework``)

    Returns:
        Practices in heading order
    """
    front_matter = front_matter or {}
    slugs = SlugAllocator()
    practices = []

    for position, section in enumerate(iter_sections(body), start=1):
        practice_id = slugs.allocate(section.heading, position)
        practices.append(build_practice(section, practice_id, front_matter, defaults))

    return practices
