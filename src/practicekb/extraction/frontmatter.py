"""Split YAML front matter from a markdown document."""

import logging
import re

import yaml

logger = logging.getLogger(__name__)

FRONT_MATTER_RE = re.compile(
    r'\A---[ \t]*\n(?:(.*?)\n)?(?:---|\.\.\.)[ \t]*(?:\n|\Z)',
    re.DOTALL,
)


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace('\r\n', '\n').replace('\r', '\n')


def split_front_matter(text: str) -> tuple[dict, str]:
    """Separate a leading front-matter block from the document body.

    The block must start on the very first line with ``---`` and end with a
    line holding ``---`` (or ``...``). Anything that does not parse as a YAML
    mapping is treated as no metadata.

    Args:
        text: Raw markdown document

    Returns:
        Tuple of (metadata, body). When no block is present the metadata is
        empty and the body is the whole input.
    """
    normalized = normalize_newlines(text)
    match = FRONT_MATTER_RE.match(normalized)
    if not match:
        return {}, text

    body = normalized[match.end():]
    raw = match.group(1) or ""

    try:
        data = yaml.safe_load(raw) if raw.strip() else {}
    except (yaml.YAMLError, RecursionError) as e:
        logger.warning(f"Ignoring malformed front matter: {e}")
        return {}, body

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        logger.warning(f"Ignoring front matter that is not a mapping ({type(data).__name__})")
        return {}, body

    return {str(key): value for key, value in data.items()}, body
