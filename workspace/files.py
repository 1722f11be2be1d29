"""Directory snapshots as editor-style file sets."""

import fnmatch
from pathlib import Path

from schemas.workspace import ProjectFileSet

DEFAULT_IGNORE = [
    ".git",
    "node_modules",
    "__pycache__",
    ".venv",
    ".next",
    "dist",
    "build",
    ".DS_Store",
]


def _ignored(parts: tuple[str, ...], patterns: list[str]) -> bool:
    return any(fnmatch.fnmatch(part, pattern) for part in parts for pattern in patterns)


def snapshot_directory(
    root: Path | str,
    ignore: list[str] | None = None,
    max_file_bytes: int = 1_000_000,
) -> ProjectFileSet:
    """Read text files under ``root`` into a file set.

    Keys are root-relative POSIX paths with a leading slash
    (``/src/App.js``), the layout the sandbox editor uses. Binary,
    undecodable and oversized files are skipped.

    Args:
        root: Project directory
        ignore: fnmatch patterns matched against every path component
        max_file_bytes: Skip files larger than this

    Returns:
        Mapping of path to content (empty if nothing readable)
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise NotADirectoryError(f"Not a directory: {root_path}")

    patterns = DEFAULT_IGNORE if ignore is None else ignore
    files: ProjectFileSet = {}

    for file_path in sorted(root_path.rglob("*")):
        if not file_path.is_file():
            continue
        relative = file_path.relative_to(root_path)
        if _ignored(relative.parts, patterns):
            continue
        if file_path.stat().st_size > max_file_bytes:
            continue
        try:
            content = file_path.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError):
            continue
        files["/" + relative.as_posix()] = content

    return files
