"""Source for markdown style guides and best practices."""

from pathlib import Path

from practicekb.core import Document
from practicekb.extraction import MarkdownPracticeExtractor
from .base import PracticeSource
from .config import SourceConfig


class MarkdownPracticeSource(PracticeSource):
    """Loads ``**/*.md`` files; every H2 section becomes a practice."""

    patterns = ["**/*.md"]
    kind = "markdown practices"

    def __init__(self, config: SourceConfig, workers: int = 4):
        super().__init__(config, workers)
        self.extractor = MarkdownPracticeExtractor(
            config.name,
            language=config.language,
            framework=config.framework,
        )

    def load_file(self, file_path: Path, relative_path: str) -> list[Document]:
        text = file_path.read_text(encoding="utf-8")
        return self.extractor.extract(text, relative_path)
