"""Field heuristics run over a single practice section.

Each function is independent and pure: it takes the section heading and/or
body (plus document front matter where relevant) and returns a best-effort
value. None of them raise on odd input; they fall back to safe defaults.
"""

import logging
import re

from practicekb.core import CATEGORIES, DEFAULT_CATEGORY, DEFAULT_SEVERITY, SEVERITIES

logger = logging.getLogger(__name__)

# Ordered category rules. The first rule with any keyword present wins, so
# order decides ambiguous sections (e.g. "pattern" beats "security").
CATEGORY_RULES: list[tuple[str, tuple[str, ...]]] = [
    ("naming", ("naming", "convention")),
    ("formatting", ("format", "indent", "spacing")),
    ("architecture", ("architect", "pattern", "structure")),
    ("testing", ("test", "spec", "mock")),
    ("security", ("security", "vulnerab", "auth")),
    ("performance", ("performance", "optimize", "memory")),
    ("documentation", ("document", "comment", "readme")),
    ("error-handling", ("error", "exception", "throw")),
    ("logging", ("log", "trace", "debug")),
    ("dependency-management", ("depend", "package", "import")),
]

# Ordered severity tiers, strongest first.
SEVERITY_RULES: list[tuple[str, tuple[str, ...]]] = [
    ("error", ("must", "required", "always")),
    ("warning", ("should", "recommended")),
    ("suggestion", ("could", "consider", "may")),
]

GOOD_LABELS = r"good|correct|do|preferred|recommended"
BAD_LABELS = r"bad|incorrect|don['’]?t|avoid|wrong"

GOOD_BLOCK_RE = re.compile(
    rf"\b(?:{GOOD_LABELS})[:\s]*\n```[\w]*\n(.*?)```", re.IGNORECASE | re.DOTALL
)
BAD_BLOCK_RE = re.compile(
    rf"\b(?:{BAD_LABELS})[:\s]*\n```[\w]*\n(.*?)```", re.IGNORECASE | re.DOTALL
)
CODE_BLOCK_RE = re.compile(r"```[\w]*\n(.*?)```", re.DOTALL)
FENCE_LANGUAGE_RE = re.compile(r"```(\w+)")

# Words in the text before the first of two unlabeled blocks that mark it as
# the anti-pattern.
BAD_FIRST_MARKERS = ("avoid", "bad", "don't", "don’t")

SCOPED_RULE_RE = re.compile(r"(?<![\w@])@[\w-]+/[\w-]+(?:/[\w-]+)*")
ESLINT_RULE_RE = re.compile(r"\beslint(?::\s*|\s+)([\w-]+)", re.IGNORECASE)
QUOTED_RULE_RE = re.compile(
    r"(?:\[`?([@\w/-]+)`?\]|`([@\w/-]+)`)\s*rule", re.IGNORECASE
)

DESCRIPTION_FALLBACK_CHARS = 200


def _front_matter_choice(front_matter: dict, key: str, allowed: tuple[str, ...]) -> str | None:
    """Return a front-matter value if it names one of the allowed values."""
    value = front_matter.get(key)
    if value is None or value == "":
        return None

    normalized = str(value).strip().lower()
    if normalized in allowed:
        return normalized

    logger.warning(f"Ignoring unknown front matter {key}: {value!r}")
    return None


def infer_category(heading: str, content: str, front_matter: dict | None = None) -> str:
    """Classify a section into exactly one category.

    Front matter ``category`` applies to every section of the document. Else
    the heading and body are scanned against CATEGORY_RULES in order.

    Args:
        heading: Section heading text
        content: Section body
        front_matter: Document metadata

    Returns:
        One of CATEGORIES
    """
    declared = _front_matter_choice(front_matter or {}, "category", CATEGORIES)
    if declared:
        return declared

    text = f"{heading} {content}".lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in text for keyword in keywords):
            return category

    return DEFAULT_CATEGORY


def infer_severity(content: str, front_matter: dict | None = None) -> str:
    """Infer severity from modal verbs in the section body (heading excluded)."""
    declared = _front_matter_choice(front_matter or {}, "severity", SEVERITIES)
    if declared:
        return declared

    lower = content.lower()
    for severity, keywords in SEVERITY_RULES:
        if any(keyword in lower for keyword in keywords):
            return severity

    return DEFAULT_SEVERITY


def _clean_block(code: str) -> str | None:
    code = code.strip()
    return code or None


def extract_examples(content: str) -> tuple[str | None, str | None]:
    """Pick out the good and bad code examples of a section.

    Labeled blocks ("Good:", "Avoid:", ...) take precedence. Only when no
    labeled block exists are unlabeled blocks assigned by position, sniffing
    the text before the first block to guess which one is the anti-pattern.
    The positional guess is a heuristic and can be wrong.

    Args:
        content: Section body

    Returns:
        Tuple of (good_example, bad_example); each may be None
    """
    good_example = None
    bad_example = None

    good_match = GOOD_BLOCK_RE.search(content)
    bad_match = BAD_BLOCK_RE.search(content)
    if good_match:
        good_example = _clean_block(good_match.group(1))
    if bad_match:
        bad_example = _clean_block(bad_match.group(1))

    if good_match or bad_match:
        return good_example, bad_example

    blocks = list(CODE_BLOCK_RE.finditer(content))
    if len(blocks) >= 2:
        before_first = content[:blocks[0].start()].lower()
        if any(marker in before_first for marker in BAD_FIRST_MARKERS):
            bad_example = _clean_block(blocks[0].group(1))
            good_example = _clean_block(blocks[1].group(1))
        else:
            good_example = _clean_block(blocks[0].group(1))
            bad_example = _clean_block(blocks[1].group(1))
    elif len(blocks) == 1:
        good_example = _clean_block(blocks[0].group(1))

    return good_example, bad_example


def extract_description(content: str) -> str:
    """Return the first prose paragraph, skipping code fences and headings."""
    for paragraph in re.split(r"\n\n+", content):
        trimmed = paragraph.strip()
        if trimmed and not trimmed.startswith("```") and not trimmed.startswith("#"):
            return trimmed

    return content[:DESCRIPTION_FALLBACK_CHARS].strip()


def extract_subsection(content: str, name: str) -> str | None:
    """Extract the body of a ``### <name>`` subsection.

    Args:
        content: Section body
        name: Subsection heading text, matched case-insensitively

    Returns:
        Subsection text up to the next H3 (or end), or None if missing/empty
    """
    pattern = re.compile(
        rf"^###[ \t]+{re.escape(name)}[ \t]*\n(.*?)(?=\n###|\Z)",
        re.IGNORECASE | re.MULTILINE | re.DOTALL,
    )
    match = pattern.search(content)
    if not match:
        return None
    text = match.group(1).strip()
    return text or None


def extract_rationale(content: str) -> str | None:
    return extract_subsection(content, "rationale")


def extract_lint_rules(content: str) -> list[str]:
    """Collect lint rule ids mentioned in a section.

    Three pattern families are checked in turn: scoped ids such as
    ``@typescript-eslint/no-explicit-any``, ``eslint: rule-name`` mentions,
    and bracketed or backticked ids followed by the word "rule".
    """
    rules: list[str] = []

    rules.extend(match.group(0) for match in SCOPED_RULE_RE.finditer(content))
    rules.extend(match.group(1) for match in ESLINT_RULE_RE.finditer(content))
    for match in QUOTED_RULE_RE.finditer(content):
        rules.append(match.group(1) or match.group(2))

    return list(dict.fromkeys(rules))


def extract_tags(content: str, front_matter: dict | None = None) -> list[str]:
    """Merge front matter tags with fence language annotations (except "text")."""
    tags: list[str] = []

    declared = (front_matter or {}).get("tags")
    if isinstance(declared, list):
        tags.extend(str(tag).lower() for tag in declared if tag is not None)

    for match in FENCE_LANGUAGE_RE.finditer(content):
        language = match.group(1).lower()
        if language != "text":
            tags.append(language)

    return list(dict.fromkeys(tags))
