# civra/core/utils.py
"""File helpers for the CLI; the parser and selector themselves never touch disk"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)

MAX_CONTEXT_FILE_BYTES = 512 * 1024


def read_file_safely(path: Path, encoding: str = "utf-8", max_bytes: int = MAX_CONTEXT_FILE_BYTES) -> Optional[str]:
    """Read a text file, or None when it is missing, unreadable or too large"""
    try:
        if not path.is_file():
            return None
        if path.stat().st_size > max_bytes:
            logger.warning("%s is larger than %d bytes, skipping", path, max_bytes)
            return None
        return path.read_text(encoding=encoding)
    except (UnicodeDecodeError, PermissionError, OSError) as e:
        logger.warning("Could not read %s: %s", path, e)
    return None


def read_context_files(root: Path, file_paths: Iterable[str]) -> Dict[str, str]:
    """
    Read the selected files relative to root, keeping selection order.
    Files that do not exist, or that resolve outside root, are left out.
    """
    resolved_root = root.resolve()
    contents: Dict[str, str] = {}
    for file_path in file_paths:
        target = (root / file_path).resolve()
        try:
            target.relative_to(resolved_root)
        except ValueError:
            logger.warning("%s is outside %s, skipping", file_path, root)
            continue
        content = read_file_safely(target)
        if content is not None:
            contents[file_path] = content
    return contents
