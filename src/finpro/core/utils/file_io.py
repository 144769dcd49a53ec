"""
File I/O utilities.

All functions operate on explicit paths. There are no implicit directory lookups.
"""

from __future__ import annotations

import os

from loguru import logger

from finpro.core.exceptions import FileIOError


def safe_write(filepath: str, content: str, mode: str = "w", encoding: str = "utf-8") -> None:
    """Write content to a file, creating parent directories as needed."""
    try:
        os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
        with open(filepath, mode, encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise FileIOError(f"Cannot write {filepath}: {e}") from e
    logger.debug(f"Wrote {len(content)} chars to {filepath}")
