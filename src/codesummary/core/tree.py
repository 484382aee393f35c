from __future__ import annotations

"""
Directory Tree Builder.

Renders a project directory as a box-drawing tree, one entry per line:

    ├── src
    │   ├── app.py
    │   └── util.py
    └── README.md

Unreadable directories are logged and rendered without children; the rest of
the walk continues.
"""

import logging
from typing import Iterable, List

from codesummary.core.scanner import list_entries

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PREFIX = "│   "
SPACE_PREFIX = "    "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(root_path: str, rules: Iterable[str], prefix: str = "") -> str:
    """
    Build the textual tree of a directory.

    Args:
        root_path: Directory to render.
        rules: Exclusion rules applied at every level.
        prefix: Indentation inherited from the parent levels.

    Returns:
        str: Newline-terminated tree lines, or an empty string when the
             directory is empty or cannot be listed.
    """
    rule_list = list(rules)
    try:
        entries = list_entries(root_path, rule_list)
    except OSError as e:
        logger.error(f"Unable to read directory {root_path}: {e}")
        return ""

    parts: List[str] = []
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = LAST_BRANCH if is_last else BRANCH
        parts.append(f"{prefix}{connector}{entry.name}\n")

        if entry.is_dir:
            child_prefix = prefix + (SPACE_PREFIX if is_last else PIPE_PREFIX)
            parts.append(build_tree(entry.full_path, rule_list, child_prefix))

    return "".join(parts)


def count_tree_lines(tree: str) -> int:
    """Number of entries in a rendered tree."""
    return len(tree.splitlines())
