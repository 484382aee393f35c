from __future__ import annotations

"""
File Content Loader.

Reads project files for the analysis prompt. Oversized files are skipped
rather than truncated, and unreadable or non-UTF-8 files degrade to None so a
single bad file never aborts the run.
"""

import logging
import os
from typing import Dict, Iterable, Optional

from codesummary.core.scanner import to_relative_path
from codesummary.domain.constants import DEFAULT_MAX_FILE_BYTES

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_content(file_path: str, max_bytes: int = DEFAULT_MAX_FILE_BYTES) -> Optional[str]:
    """
    Read a whole file as UTF-8 text, subject to a size ceiling.

    Newlines are not translated, so the returned text matches the file
    byte for byte once encoded back to UTF-8.

    Args:
        file_path: File to read.
        max_bytes: Largest accepted file size in bytes.

    Returns:
        Optional[str]: File content, or None if the file is too large,
                       unreadable or not valid UTF-8.
    """
    try:
        size = os.path.getsize(file_path)
        if size > max_bytes:
            logger.warning(
                f"Skipping {file_path} as it exceeds the size limit of {max_bytes} bytes."
            )
            return None

        with open(file_path, "r", encoding="utf-8", newline="") as f:
            return f.read()

    except UnicodeDecodeError as e:
        logger.error(f"Unable to decode {file_path} as UTF-8 text: {e}")
    except OSError as e:
        logger.error(f"Unable to read file {file_path}: {e}")

    return None


def load_file_records(
        file_paths: Iterable[str],
        root_path: str,
        max_bytes: int = DEFAULT_MAX_FILE_BYTES,
) -> Dict[str, str]:
    """
    Load a sequence of files into an ordered relative-path to content map.

    Files that fail to load are left out.

    Args:
        file_paths: Absolute paths in traversal order.
        root_path: Project root used to compute relative keys.
        max_bytes: Size ceiling forwarded to load_content.

    Returns:
        Dict[str, str]: Records in the same order as file_paths.
    """
    records: Dict[str, str] = {}
    for path in file_paths:
        content = load_content(path, max_bytes)
        if content is None:
            continue
        rel_path = to_relative_path(path, root_path)
        records[rel_path] = content
        logger.info(f"Collected: {rel_path}")
    return records
