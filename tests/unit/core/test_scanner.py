from __future__ import annotations

"""
Unit tests for the Directory Scanner.

Verifies:
1. Listing order (directories first, then names).
2. Exclusion of entries and whole subtrees during collection.
3. Resilience to unreadable directories.
"""

import os
import sys
from pathlib import Path

import pytest

from codesummary.core.filters import default_exclude_rules, is_excluded
from codesummary.core.scanner import collect_files, list_entries, to_relative_path


def test_list_entries_orders_directories_first(tmp_path):
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    (tmp_path / "A.txt").write_text("a", encoding="utf-8")
    (tmp_path / "zdir").mkdir()
    (tmp_path / "adir").mkdir()

    entries = list_entries(str(tmp_path), [])

    assert [e.name for e in entries] == ["adir", "zdir", "A.txt", "b.txt"]
    assert [e.is_dir for e in entries] == [True, True, False, False]
    assert entries[0].full_path == os.path.join(str(tmp_path), "adir")


def test_list_entries_applies_rules(tmp_path):
    (tmp_path / "keep.py").write_text("", encoding="utf-8")
    (tmp_path / "drop.log").write_text("", encoding="utf-8")
    (tmp_path / "node_modules").mkdir()

    entries = list_entries(str(tmp_path), ["*.log", "node_modules"])

    assert [e.name for e in entries] == ["keep.py"]


def test_list_entries_raises_on_missing_directory(tmp_path):
    with pytest.raises(OSError):
        list_entries(str(tmp_path / "missing"), [])


def test_collect_files_end_to_end_scenario(sample_project):
    """Only non-excluded regular files are returned; empty dirs contribute nothing."""
    files = collect_files(str(sample_project), default_exclude_rules())
    rel = [to_relative_path(p, str(sample_project)) for p in files]

    assert rel == ["src/app.py", "src/util.js", "a.txt", "README"]
    assert all(os.path.isabs(p) for p in files)


def test_collect_files_minimal_scenario(tmp_path):
    (tmp_path / "a.txt").write_text("hello", encoding="utf-8")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "ignored.js").write_text("x", encoding="utf-8")
    (tmp_path / "empty").mkdir()

    files = collect_files(str(tmp_path), default_exclude_rules())

    assert [to_relative_path(p, str(tmp_path)) for p in files] == ["a.txt"]


def test_collect_files_never_returns_excluded_names_or_descendants(tmp_path):
    rules = ["build", "*.tmp"]
    nested = tmp_path / "pkg" / "build" / "deep"
    nested.mkdir(parents=True)
    (nested / "artifact.py").write_text("", encoding="utf-8")
    (tmp_path / "pkg" / "mod.py").write_text("", encoding="utf-8")
    (tmp_path / "pkg" / "scratch.tmp").write_text("", encoding="utf-8")

    files = collect_files(str(tmp_path), rules)

    assert [to_relative_path(p, str(tmp_path)) for p in files] == ["pkg/mod.py"]
    for path in files:
        parts = Path(path).relative_to(tmp_path).parts
        assert not any(is_excluded(part, rules) for part in parts)


def test_collect_files_missing_root_returns_empty(tmp_path, caplog):
    files = collect_files(str(tmp_path / "nope"), [])

    assert files == []
    assert "Unable to read directory" in caplog.text


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks require privileges on Windows")
def test_collect_files_does_not_follow_symlinks(tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "f.py").write_text("", encoding="utf-8")
    os.symlink(str(real), str(tmp_path / "link"))
    os.symlink(str(real / "f.py"), str(tmp_path / "file_link.py"))

    files = collect_files(str(tmp_path), [])

    assert [to_relative_path(p, str(tmp_path)) for p in files] == ["real/f.py"]


def test_to_relative_path_uses_forward_slashes(tmp_path):
    path = os.path.join(str(tmp_path), "a", "b", "c.py")
    assert to_relative_path(path, str(tmp_path)) == "a/b/c.py"
