from __future__ import annotations

"""
FileSystem Output Layer.

Persists the generated tree and analysis reports. Each file is written once,
in a single operation, after all its content has been assembled.
"""

import logging

logger = logging.getLogger(__name__)


def write_output(output_path: str, text: str) -> bool:
    """
    Create or truncate a UTF-8 text file with the given content.

    Write failures are logged and reported through the return value; they are
    not retried.

    Args:
        output_path: Destination file.
        text: Complete file content.

    Returns:
        bool: True if the file was written.
    """
    try:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return True
    except OSError as e:
        logger.error(f"Failed to write output file '{output_path}': {e}")
        return False
