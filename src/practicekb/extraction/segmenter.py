"""Split a markdown body into second-level heading sections."""

import re
from dataclasses import dataclass
from typing import Iterator

SECTION_BOUNDARY_RE = re.compile(r'^##[ \t]')


@dataclass
class RawSection:
    """A heading and the text below it, up to the next section boundary."""
    heading: str
    content: str


def is_section_boundary(line: str) -> bool:
    """Check if a line opens a new practice section (an H2 heading)."""
    return bool(SECTION_BOUNDARY_RE.match(line))


def iter_sections(body: str) -> Iterator[RawSection]:
    """Yield one RawSection per second-level heading, in document order.

    Text before the first H2 is preamble and is never yielded. A boundary
    line with no heading text still ends the previous section, but its own
    section is skipped.

    Args:
        body: Markdown body with front matter already removed

    Yields:
        RawSection for each well-formed H2 heading
    """
    heading: str | None = None
    lines: list[str] = []
    in_section = False

    for line in body.split('\n'):
        if is_section_boundary(line):
            if in_section and heading:
                yield RawSection(heading=heading, content='\n'.join(lines))
            heading = line[2:].strip()
            lines = []
            in_section = True
        elif in_section:
            lines.append(line)

    if in_section and heading:
        yield RawSection(heading=heading, content='\n'.join(lines))
