"""Extract practice Documents from a markdown style guide."""

from pathlib import PurePosixPath

from practicekb.core import Document, Practice
from .assembler import assemble_practices, first_text
from .formatter import overview_document, practice_document
from .frontmatter import normalize_newlines, split_front_matter


class MarkdownPracticeExtractor:
    """Turns one markdown document into practice Documents plus an overview.

    Each H2 section becomes a practice. The extractor keeps no state between
    calls, so the same input always produces the same output.
    """

    def __init__(
        self,
        source_name: str,
        language: str | None = None,
        framework: str | None = None,
    ):
        """Initialize the extractor.

        Args:
            source_name: Name of the source registration, used in document ids
            language: Source-wide default language
            framework: Source-wide default framework
        """
        self.source_name = source_name
        self.defaults = {"language": language, "framework": framework}

    def parse(self, text: str) -> tuple[dict, str, list[Practice]]:
        """Split front matter and assemble practices.

        Returns:
            Tuple of (front_matter, body, practices)
        """
        front_matter, body = split_front_matter(normalize_newlines(text))
        practices = assemble_practices(body, front_matter, self.defaults)
        return front_matter, body, practices

    def extract(self, text: str, relative_path: str) -> list[Document]:
        """Extract Documents from a markdown document.

        Args:
            text: Raw markdown, optionally with front matter
            relative_path: File path relative to the source root (posix style)

        Returns:
            One Document per practice in heading order, then the overview
        """
        front_matter, body, practices = self.parse(text)

        documents = [
            practice_document(practice, self.source_name, relative_path)
            for practice in practices
        ]

        title = first_text(front_matter.get("title")) or PurePosixPath(relative_path).stem
        documents.append(overview_document(
            self.source_name,
            relative_path,
            title=title,
            content=body,
            practices=practices,
            language=first_text(front_matter.get("language"), self.defaults["language"]),
            framework=first_text(front_matter.get("framework"), self.defaults["framework"]),
        ))

        return documents
