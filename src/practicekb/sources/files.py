"""File enumeration under a source root."""

from pathlib import Path

DEFAULT_IGNORE_DIRS = frozenset({
    "node_modules",
    "dist",
    "build",
    ".git",
    ".venv",
    "__pycache__",
})


def find_files(
    root: Path,
    patterns: list[str],
    ignore_dirs: frozenset[str] = DEFAULT_IGNORE_DIRS,
) -> list[Path]:
    """Find files under root whose relative path matches any glob pattern.

    Args:
        root: Source root directory
        patterns: Glob patterns like ``**/*.md``
        ignore_dirs: Directory names to skip anywhere in the path

    Returns:
        Sorted, de-duplicated absolute paths
    """
    found = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if not path.is_file():
                continue
            relative = path.relative_to(root)
            if any(part in ignore_dirs for part in relative.parts[:-1]):
                continue
            found.add(path)

    return sorted(found)


def relative_posix(path: Path, root: Path) -> str:
    """Path relative to root, always with forward slashes."""
    return path.relative_to(root).as_posix()
