from __future__ import annotations

"""
Directory Scanner.

Lists directory contents through the exclusion filter and collects every
remaining regular file of a project. Listings are ordered directories first,
then files, each group sorted by name, so that the tree and the prompt are
reproducible for a given filesystem snapshot.
"""

import logging
import os
from typing import Iterable, List, Tuple

from codesummary.core.filters import is_excluded
from codesummary.domain.models import DirectoryEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def list_entries(dir_path: str, rules: Iterable[str]) -> List[DirectoryEntry]:
    """
    List the non-excluded entries of one directory.

    Symbolic links are reported as they are, never followed, so a link to a
    directory shows up as a leaf and cannot cause a traversal loop.

    Args:
        dir_path: Directory to list.
        rules: Exclusion rules applied to each entry name.

    Returns:
        List[DirectoryEntry]: Surviving entries, directories first.

    Raises:
        OSError: If the directory cannot be listed.
    """
    rule_list = list(rules)
    entries: List[DirectoryEntry] = []

    with os.scandir(dir_path) as it:
        for item in it:
            if is_excluded(item.name, rule_list):
                continue
            entries.append(
                DirectoryEntry(
                    name=item.name,
                    is_dir=_is_real_dir(item),
                    full_path=os.path.join(dir_path, item.name),
                )
            )

    entries.sort(key=_sort_key)
    return entries


def collect_files(root_path: str, rules: Iterable[str]) -> List[str]:
    """
    Recursively gather the paths of all non-excluded regular files.

    Traversal is depth-first, a directory's files and subdirectories appear in
    listing order, and excluded directories are never entered. Directories
    that cannot be listed are logged and skipped.

    Args:
        root_path: Project directory to walk.
        rules: Exclusion rules.

    Returns:
        List[str]: Absolute file paths in traversal order.
    """
    rule_list = list(rules)
    files: List[str] = []
    _collect_into(os.path.abspath(root_path), rule_list, files)
    logger.debug(f"Collected {len(files)} files under {root_path}")
    return files


def to_relative_path(file_path: str, root_path: str) -> str:
    """Express a path relative to the root, always with '/' separators."""
    rel = os.path.relpath(file_path, root_path)
    return rel.replace(os.sep, "/")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _collect_into(dir_path: str, rules: List[str], files: List[str]) -> None:
    try:
        entries = list_entries(dir_path, rules)
    except OSError as e:
        logger.error(f"Unable to read directory {dir_path}: {e}")
        return

    for entry in entries:
        if entry.is_dir:
            _collect_into(entry.full_path, rules, files)
        elif _is_regular_file(entry.full_path):
            files.append(entry.full_path)


def _is_real_dir(item: os.DirEntry) -> bool:
    try:
        return item.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _is_regular_file(path: str) -> bool:
    return os.path.isfile(path) and not os.path.islink(path)


def _sort_key(entry: DirectoryEntry) -> Tuple[int, str, str]:
    return (0 if entry.is_dir else 1, entry.name.lower(), entry.name)
