"""Practice sources: configuration and file-backed loaders."""

from .base import PracticeSource
from .config import ProviderConfig, SourceConfig, default_config, load_config
from .files import DEFAULT_IGNORE_DIRS, find_files
from .markdown_source import MarkdownPracticeSource
from .structured_source import (
    PracticeModel,
    StructuredPracticeSource,
    StyleGuideModel,
)

__all__ = [
    "PracticeSource",
    "MarkdownPracticeSource",
    "StructuredPracticeSource",
    "PracticeModel",
    "StyleGuideModel",
    "SourceConfig",
    "ProviderConfig",
    "default_config",
    "load_config",
    "DEFAULT_IGNORE_DIRS",
    "find_files",
]
