"""Exclusion matching — glob-like URL path patterns.

Three pattern shapes are recognised:

    /admin/*   -> /admin and anything below /admin/
    /draft*    -> anything starting with /draft
    /login     -> exactly /login

Matching is case-sensitive.  No other wildcard or regex syntax is
interpreted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def matches_pattern(path: str, pattern: str) -> bool:
    """Return True if *path* matches a single *pattern*."""
    if pattern.endswith("/*"):
        prefix = pattern[:-2]
        return path == prefix or path.startswith(prefix + "/")
    if pattern.endswith("*"):
        return path.startswith(pattern[:-1])
    return path == pattern


def is_excluded(path: str, patterns: Iterable[str]) -> bool:
    """Return True if *path* matches any of *patterns*."""
    return any(matches_pattern(path, pattern) for pattern in patterns)
