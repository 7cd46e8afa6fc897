"""Practice extraction from markdown style guides."""

from .assembler import assemble_practices, build_practice, slugify
from .extractor import MarkdownPracticeExtractor
from .formatter import (
    OVERVIEW_TYPE,
    PRACTICE_TYPE,
    format_practice_content,
    format_structured_practice_content,
    format_style_guide_overview,
    overview_document,
    practice_document,
)
from .frontmatter import split_front_matter
from .heuristics import (
    CATEGORY_RULES,
    SEVERITY_RULES,
    extract_description,
    extract_examples,
    extract_lint_rules,
    extract_rationale,
    extract_subsection,
    extract_tags,
    infer_category,
    infer_severity,
)
from .segmenter import RawSection, iter_sections

__all__ = [
    # Pipeline
    "MarkdownPracticeExtractor",
    "split_front_matter",
    "iter_sections",
    "RawSection",
    "assemble_practices",
    "build_practice",
    "slugify",
    # Heuristics
    "CATEGORY_RULES",
    "SEVERITY_RULES",
    "infer_category",
    "infer_severity",
    "extract_examples",
    "extract_description",
    "extract_subsection",
    "extract_rationale",
    "extract_lint_rules",
    "extract_tags",
    # Formatting
    "PRACTICE_TYPE",
    "OVERVIEW_TYPE",
    "format_practice_content",
    "format_structured_practice_content",
    "format_style_guide_overview",
    "practice_document",
    "overview_document",
]
