"""Unit tests for practice content formatting."""

from practicekb.core import Practice
from practicekb.extraction import (
    format_practice_content,
    format_structured_practice_content,
    format_style_guide_overview,
    overview_document,
)


def make_practice(**kwargs):
    defaults = {"id": "use-const", "title": "Use const", "description": "Prefer const."}
    defaults.update(kwargs)
    return Practice(**defaults)


class TestFormatPracticeContent:
    """Tests for format_practice_content()."""

    def test_minimal(self):
        assert format_practice_content(make_practice()) == "# Use const\n\nPrefer const."

    def test_all_sections(self):
        practice = make_practice(
            rationale="Immutability.",
            good_example="const x = 1;",
            bad_example="var x = 1;",
            lint_rules=["prefer-const", "no-var"],
        )
        assert format_practice_content(practice) == "\n".join([
            "# Use const",
            "",
            "Prefer const.",
            "",
            "## Rationale",
            "Immutability.",
            "",
            "## Good Example",
            "```",
            "const x = 1;",
            "```",
            "",
            "## Bad Example",
            "```",
            "var x = 1;",
            "```",
            "",
            "## Related Lint Rules",
            "prefer-const, no-var",
        ])


class TestFormatStructuredPracticeContent:
    """Tests for format_structured_practice_content()."""

    def test_header_and_lists(self):
        practice = make_practice(
            category="naming",
            severity="warning",
            language="javascript",
            bad_example="var x = 1;",
            exceptions=["Loop counters"],
            lint_rules=["prefer-const"],
            references=["https://eslint.org/docs/rules/prefer-const"],
        )
        content = format_structured_practice_content(practice)
        assert "**Category:** naming" in content
        assert "**Severity:** warning" in content
        assert "**Language:** javascript" in content
        assert "## Bad Example (Avoid)\n```\nvar x = 1;\n```" in content
        assert "## Exceptions\n- Loop counters" in content
        assert "## Related Lint Rules\n- prefer-const" in content
        assert "## References\n- https://eslint.org/docs/rules/prefer-const" in content
        assert "## Good Example" not in content


class TestStyleGuideOverview:
    """Tests for format_style_guide_overview() and overview_document()."""

    def test_grouped_by_category(self):
        practices = [
            make_practice(id="a", title="A", category="naming", severity="error"),
            make_practice(id="b", title="B", category="testing"),
            make_practice(id="c", title="C", category="naming"),
        ]
        content = format_style_guide_overview(
            "JS Guide", "javascript", practices, framework="node", version="1.2"
        )
        assert content.startswith("# JS Guide\n\n**Language:** javascript")
        assert "**Framework:** node" in content
        assert "**Version:** 1.2" in content
        assert content.index("### naming") < content.index("### testing")
        assert "- **A** [error]: Prefer const...." in content
        assert content.index("**C**") < content.index("### testing")

    def test_overview_document_categories(self):
        practices = [
            make_practice(category="testing"),
            make_practice(category="naming"),
            make_practice(category="testing"),
        ]
        doc = overview_document("src", "a.md", "A", "body", practices)
        assert doc.id == "src:a.md"
        assert doc.metadata["categories"] == ["testing", "naming"]
        assert doc.metadata["practiceCount"] == 3
        assert doc.metadata["language"] == "general"
