"""
File system utilities: source tree walking and text reading
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from .errors import AuditError, ErrorType

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def path_ends_with(path: Path, suffix: PathLike) -> bool:
    """Component-wise suffix match, e.g. ``a/src/bin`` ends with ``src/bin``"""
    suffix_parts = Path(suffix).parts
    if not suffix_parts or len(suffix_parts) > len(path.parts):
        return False
    return path.parts[-len(suffix_parts):] == suffix_parts


def get_files_with_extension(
    root: PathLike,
    extension: str,
    skip_dirs: Iterable[PathLike] = (),
    skip_files: Iterable[PathLike] = (),
) -> List[Path]:
    """
    Recursively collect files with the given extension

    Args:
        root: Directory to walk
        extension: File extension without the leading dot (e.g. 'rs')
        skip_dirs: Directory path suffixes that are not descended into
        skip_files: File path suffixes that are left out

    Returns:
        Matching file paths in sorted walk order
    """
    root = Path(root)
    if not root.is_dir():
        raise AuditError(f"Directory not found: {root}", error_type=ErrorType.FILE_IO)

    skip_dirs = list(skip_dirs)
    skip_files = list(skip_files)
    files: List[Path] = []
    _collect(root, extension.lstrip('.'), skip_dirs, skip_files, files)
    logger.debug(f"Collected {len(files)} '.{extension}' files under {root}")
    return files


def _collect(directory: Path, extension: str, skip_dirs: list, skip_files: list, files: List[Path]):
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise AuditError(
            f"Failed to read directory: {directory}", error_type=ErrorType.FILE_IO, cause=e
        )

    for path in entries:
        if path.is_dir():
            if any(path_ends_with(path, d) for d in skip_dirs):
                logger.debug(f"Skipping directory: {path}")
                continue
            _collect(path, extension, skip_dirs, skip_files, files)
        elif path.suffix == f".{extension}":
            if any(path_ends_with(path, f) for f in skip_files):
                logger.debug(f"Skipping file: {path}")
                continue
            files.append(path)


def read_text(path: PathLike) -> str:
    """Read a UTF-8 text file, raising AuditError on any failure"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise AuditError(f"Failed to read file: {path}", error_type=ErrorType.FILE_IO, cause=e)
