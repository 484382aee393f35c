from __future__ import annotations

"""
Exclusion Filter.

Decides whether a file or directory name is skipped during traversal. Rules
are either literal names ('node_modules') or single leading-wildcard suffix
patterns ('*.log'). Matching is done on the bare name only: there is no case
folding, no path awareness and no negation syntax.
"""

from typing import Iterable, List

from codesummary.domain.constants import DEFAULT_EXCLUDE_RULES

WILDCARD = "*"

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_exclude_rules() -> List[str]:
    """
    Get a fresh copy of the canonical exclusion policy.

    Covers dependency folders, VCS metadata, build artifacts, editor settings,
    log/temp files and package manager lock files.

    Returns:
        List[str]: Literal names and '*<suffix>' patterns.
    """
    return list(DEFAULT_EXCLUDE_RULES)

# -----------------------------------------------------------------------------
# MATCHING
# -----------------------------------------------------------------------------

def matches_rule(name: str, rule: str) -> bool:
    """
    Evaluate a single exclusion rule against a name.

    Args:
        name: File or directory name.
        rule: Literal name, or '*' followed by a suffix.

    Returns:
        bool: True if the rule applies.
    """
    if rule.startswith(WILDCARD):
        return name.endswith(rule[len(WILDCARD):])
    return name == rule


def is_excluded(name: str, rules: Iterable[str]) -> bool:
    """
    Check a name against every configured rule.

    Args:
        name: File or directory name (no path separators expected).
        rules: Exclusion rules, evaluated in order.

    Returns:
        bool: True on the first matching rule, False if none match.
    """
    for rule in rules:
        if matches_rule(name, rule):
            return True
    return False
