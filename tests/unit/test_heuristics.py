"""Unit tests for the per-section field heuristics."""

import pytest

from practicekb.extraction import (
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


class TestInferCategory:
    """Tests for infer_category()."""

    def test_front_matter_wins(self):
        """Front matter category overrides body keywords."""
        fm = {"category": "security"}
        assert infer_category("Naming things", "Use a naming convention.", fm) == "security"

    def test_front_matter_case_insensitive(self):
        assert infer_category("Title", "", {"category": "Testing"}) == "testing"

    def test_unknown_front_matter_category_ignored(self):
        """An unknown category falls through to keyword inference."""
        assert infer_category("Indentation", "", {"category": "style"}) == "formatting"

    @pytest.mark.parametrize("heading,expected", [
        ("Variable naming", "naming"),
        ("Indentation width", "formatting"),
        ("Layered architecture", "architecture"),
        ("Mock external calls", "testing"),
        ("Check authorization", "security"),
        ("Optimize hot loops", "performance"),
        ("Keep the README current", "documentation"),
        ("Throw typed exceptions", "error-handling"),
        ("Emit log lines", "logging"),
        ("Pin package versions", "dependency-management"),
    ])
    def test_keyword_per_category(self, heading, expected):
        assert infer_category(heading, "") == expected

    def test_rule_order_breaks_ties(self):
        """An earlier rule wins when keywords from two rules are present."""
        assert infer_category("Security", "Use the guard pattern for auth.") == "architecture"

    def test_keywords_checked_in_body(self):
        assert infer_category("Rule", "Write a unit test first.") == "testing"

    def test_case_insensitive(self):
        assert infer_category("SECURITY REVIEW", "") == "security"

    def test_default_general(self):
        assert infer_category("Use const", "Prefer const.") == "general"

    def test_rule_table_order(self):
        """The rule table keeps its fixed order."""
        assert [name for name, _ in CATEGORY_RULES] == [
            "naming", "formatting", "architecture", "testing", "security",
            "performance", "documentation", "error-handling", "logging",
            "dependency-management",
        ]


class TestInferSeverity:
    """Tests for infer_severity()."""

    def test_should_is_warning(self):
        assert infer_severity("You should use X.") == "warning"

    def test_must_beats_should(self):
        assert infer_severity("You must do this and should do that.") == "error"

    @pytest.mark.parametrize("text,expected", [
        ("This is required.", "error"),
        ("Always close files.", "error"),
        ("This is recommended.", "warning"),
        ("You could inline it.", "suggestion"),
        ("Consider a helper.", "suggestion"),
        ("Nothing modal here.", "suggestion"),
    ])
    def test_tiers(self, text, expected):
        assert infer_severity(text) == expected

    def test_front_matter_wins(self):
        assert infer_severity("You must.", {"severity": "info"}) == "info"

    def test_unknown_front_matter_severity_ignored(self):
        assert infer_severity("You should.", {"severity": "critical"}) == "warning"

    def test_tier_order(self):
        assert [name for name, _ in SEVERITY_RULES] == ["error", "warning", "suggestion"]


class TestExtractExamples:
    """Tests for extract_examples()."""

    def test_no_code_fences(self):
        """Both examples are None without code blocks."""
        assert extract_examples("Just prose.\n\nMore prose.") == (None, None)

    def test_single_unlabeled_block_is_good(self):
        content = "Prefer this:\n\n```js\nconst x = 1;\n```\n"
        assert extract_examples(content) == ("const x = 1;", None)

    def test_labeled_good_and_bad(self):
        content = (
            "Bad:\n```js\nvar x = 1;\n```\n\n"
            "Good:\n```js\nconst x = 1;\n```\n"
        )
        assert extract_examples(content) == ("const x = 1;", "var x = 1;")

    def test_labeled_bad_only(self):
        """A labeled bad block alone disables the positional fallback."""
        content = "Avoid:\n```py\neval(x)\n```\n\nSomething:\n```py\nast.literal_eval(x)\n```\n"
        assert extract_examples(content) == (None, "eval(x)")

    def test_label_variants(self):
        content = "Incorrect:\n```\na == b\n```\n\nPreferred:\n```\na === b\n```\n"
        assert extract_examples(content) == ("a === b", "a == b")

    def test_dont_label(self):
        content = "Don't:\n```\nx = None\n```\n\nDo:\n```\nx = 0\n```\n"
        assert extract_examples(content) == ("x = 0", "x = None")

    def test_unlabeled_pair_with_avoid_first(self):
        """'avoid this' before the first block makes it the bad example."""
        content = (
            "We avoid this style:\n\n```js\nvar a = 1;\n```\n\n"
            "Instead write:\n\n```js\nlet a = 1;\n```\n"
        )
        assert extract_examples(content) == ("let a = 1;", "var a = 1;")

    def test_unlabeled_pair_with_curly_dont_first(self):
        """A typographic apostrophe in don’t marks the first block as bad too."""
        content = (
            "Don’t write it like this.\n\n```\nbad()\n```\n\n"
            "Write it like so.\n\n```\ngood()\n```\n"
        )
        assert extract_examples(content) == ("good()", "bad()")

    def test_unlabeled_pair_default_order(self):
        """Without an anti-pattern hint the first block is good."""
        content = "First:\n\n```\none()\n```\n\nSecond:\n\n```\ntwo()\n```\n"
        assert extract_examples(content) == ("one()", "two()")

    def test_empty_block_is_absent(self):
        assert extract_examples("```\n\n```\n") == (None, None)


class TestExtractDescription:
    """Tests for extract_description()."""

    def test_first_paragraph(self):
        content = "\nPrefer const.\n\nMore detail here.\n"
        assert extract_description(content) == "Prefer const."

    def test_skips_code_and_headings(self):
        content = "```js\ncode\n```\n\n### Sub\n\nReal description.\n"
        assert extract_description(content) == "Real description."

    def test_fallback_truncates(self):
        """With only code, the first 200 characters are used."""
        content = "```\n" + "x" * 300 + "\n```"
        description = extract_description(content)
        assert len(description) <= 200
        assert description.startswith("```")

    def test_empty_content(self):
        assert extract_description("") == ""


class TestExtractSubsection:
    """Tests for extract_subsection() and extract_rationale()."""

    def test_rationale(self):
        content = "Desc.\n\n### Rationale\n\nConsistency matters.\n\n### Exceptions\n\nNone.\n"
        assert extract_rationale(content) == "Consistency matters."

    def test_rationale_case_insensitive(self):
        assert extract_rationale("### RATIONALE\nBecause.\n") == "Because."

    def test_rationale_to_end(self):
        assert extract_rationale("### Rationale\nLine one.\nLine two.") == "Line one.\nLine two."

    def test_heading_must_equal_name(self):
        assert extract_rationale("### Rationale and history\nText\n") is None

    def test_missing(self):
        assert extract_rationale("No subsections.") is None

    def test_empty_subsection(self):
        assert extract_subsection("### Rationale\n\n### Next\nx", "rationale") is None


class TestExtractLintRules:
    """Tests for extract_lint_rules()."""

    def test_scoped_rule(self):
        content = "Enable @typescript-eslint/no-explicit-any everywhere."
        assert extract_lint_rules(content) == ["@typescript-eslint/no-explicit-any"]

    def test_eslint_mention(self):
        assert extract_lint_rules("Enforced by eslint: no-var.") == ["no-var"]

    def test_bracket_rule(self):
        assert extract_lint_rules("See the [`prefer-const`] rule.") == ["prefer-const"]

    def test_backtick_rule(self):
        assert extract_lint_rules("The `eqeqeq` rule catches this.") == ["eqeqeq"]

    def test_deduplicated_family_order(self):
        content = (
            "Use [no-var] rule. Also eslint no-var and "
            "@typescript-eslint/no-unused-vars, @typescript-eslint/no-unused-vars."
        )
        assert extract_lint_rules(content) == ["@typescript-eslint/no-unused-vars", "no-var"]

    def test_scoped_rule_not_double_counted_as_eslint(self):
        assert extract_lint_rules("@typescript-eslint/ban-types") == ["@typescript-eslint/ban-types"]

    def test_none(self):
        assert extract_lint_rules("Plain text.") == []


class TestExtractTags:
    """Tests for extract_tags()."""

    def test_fence_languages(self):
        content = "```TS\na\n```\n\n```js\nb\n```\n\n```ts\nc\n```\n"
        assert extract_tags(content) == ["ts", "js"]

    def test_text_is_excluded(self):
        assert extract_tags("```text\nplain\n```\n") == []

    def test_front_matter_tags_first(self):
        content = "```python\nx\n```\n"
        assert extract_tags(content, {"tags": ["Style", "python"]}) == ["style", "python"]

    def test_non_list_front_matter_tags_ignored(self):
        assert extract_tags("", {"tags": "style"}) == []
