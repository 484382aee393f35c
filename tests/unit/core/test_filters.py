from __future__ import annotations

"""
Unit tests for the Exclusion Filter.

Verifies:
1. Literal rules match whole names only.
2. Wildcard rules are exact suffix comparisons.
3. Default policy coverage.
"""

import pytest

from codesummary.core.filters import default_exclude_rules, is_excluded, matches_rule


def test_empty_rule_set_never_excludes():
    """Without rules nothing is skipped."""
    for name in ["node_modules", "a.log", "", "*"]:
        assert is_excluded(name, []) is False


def test_literal_rule_requires_exact_name():
    rules = ["build"]

    assert is_excluded("build", rules) is True
    assert is_excluded("Build", rules) is False
    assert is_excluded("build2", rules) is False
    assert is_excluded("rebuild", rules) is False


def test_wildcard_rule_is_suffix_match():
    rules = ["*.log"]

    assert is_excluded("server.log", rules) is True
    assert is_excluded(".log", rules) is True
    assert is_excluded("catalog", rules) is False
    # The bare suffix text without its dot is not a match
    assert is_excluded("log", rules) is False
    assert is_excluded("server.LOG", rules) is False


def test_wildcard_suffix_without_dot_matches_any_ending():
    """'*tmp' is a plain suffix: it is not restricted to extensions."""
    assert matches_rule("backup.tmp", "*tmp") is True
    assert matches_rule("attmp", "*tmp") is True
    assert matches_rule("tmp.txt", "*tmp") is False


def test_lone_wildcard_matches_everything():
    assert matches_rule("anything", "*") is True
    assert matches_rule("", "*") is True


@pytest.mark.parametrize("name", [
    "node_modules", ".git", "dist", "build", "coverage", ".vscode",
    "npm-debug.log", "scratch.tmp", "package-lock.json", "yarn.lock",
])
def test_default_rules_block_common_noise(name):
    assert is_excluded(name, default_exclude_rules()) is True


@pytest.mark.parametrize("name", ["src", "main.py", "package.json", "README.md", ".gitignore"])
def test_default_rules_keep_project_files(name):
    assert is_excluded(name, default_exclude_rules()) is False


def test_default_rules_returns_fresh_copy():
    rules = default_exclude_rules()
    rules.append("src")

    assert "src" not in default_exclude_rules()
