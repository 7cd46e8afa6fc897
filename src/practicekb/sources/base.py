"""Shared behaviour for file-backed practice sources."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from practicekb.core import Document
from .config import SourceConfig
from .files import find_files, relative_posix

logger = logging.getLogger(__name__)


class PracticeSource:
    """Loads Documents from every matching file under a source root.

    Subclasses set ``patterns`` and implement ``load_file``. Files are loaded
    on a thread pool; a file that fails is logged and skipped so the rest of
    the batch still loads. Output follows sorted file order.
    """

    patterns: list[str] = []
    kind = "practices"

    def __init__(self, config: SourceConfig, workers: int = 4):
        self.config = config
        self.name = config.name
        self.base_path = Path(config.path)
        self.workers = workers
        self.connected = False
        self._document_cache: dict[str, Document] = {}

    def connect(self) -> None:
        """Check the source root exists.

        Raises:
            FileNotFoundError: If the root directory is missing
        """
        if not self.base_path.is_dir():
            raise FileNotFoundError(f"Practice source path not found: {self.base_path}")
        self.connected = True
        logger.info(f"Connected to {self.kind} source '{self.name}' at {self.base_path}")

    def disconnect(self) -> None:
        self.connected = False
        self._document_cache.clear()

    def load_file(self, file_path: Path, relative_path: str) -> list[Document]:
        raise NotImplementedError

    def _read_and_load(self, file_path: Path) -> list[Document]:
        return self.load_file(file_path, relative_posix(file_path, self.base_path))

    def fetch_documents(self) -> list[Document]:
        """Load Documents from all files of this source.

        Returns:
            Documents grouped by file in sorted path order
        """
        files = find_files(self.base_path, self.patterns)
        logger.info(f"Found {len(files)} {self.kind} files in '{self.name}'")

        results: dict[Path, list[Document]] = {}
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = {executor.submit(self._read_and_load, path): path for path in files}

            for future in as_completed(futures):
                path = futures[future]
                try:
                    results[path] = future.result()
                except Exception as e:
                    logger.warning(f"Failed to load {self.kind} file {path}: {e}")

        documents = []
        for path in files:
            documents.extend(results.get(path, []))

        self._document_cache = {doc.id: doc for doc in documents}
        return documents

    def fetch_document(self, document_id: str) -> Document | None:
        return self._document_cache.get(document_id)

    def document_count(self) -> int:
        return len(self._document_cache)
