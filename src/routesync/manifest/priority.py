"""Priority resolution — sitemap priority and change frequency for a path.

Resolution order (first applicable wins):
    1. Explicit overrides, in insertion order (same matching as exclusions).
    2. The home page ``/`` -> 1.0.
    3. Depth heuristic: one segment -> 0.8, two -> 0.6, deeper -> default.

Overrides are checked before the home-page rule so that configuration
stays authoritative, including for ``/``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from routesync.manifest.matching import matches_pattern

if TYPE_CHECKING:
    from routesync._types import ChangeFrequency, PriorityOverrides

HOME_PRIORITY = 1.0
DEFAULT_PRIORITY = 0.5
DEFAULT_CHANGE_FREQUENCY: ChangeFrequency = "weekly"

# Priority by number of non-empty path segments
_DEPTH_PRIORITIES: dict[int, float] = {
    1: 0.8,
    2: 0.6,
}


@dataclass(frozen=True, slots=True)
class PriorityResult:
    """Resolved scoring for one URL path.

    Attributes:
        priority: Sitemap priority in ``[0, 1]``.
        change_frequency: Sitemap change frequency.

    """

    priority: float
    change_frequency: ChangeFrequency


def clamp_priority(value: float) -> float:
    """Clamp *value* into the sitemap priority range ``[0, 1]``."""
    return min(1.0, max(0.0, float(value)))


def path_depth(path: str) -> int:
    """Number of non-empty segments in a URL path (``/`` has depth 0)."""
    return len([segment for segment in path.split("/") if segment])


def resolve_priority(
    path: str,
    overrides: PriorityOverrides | None = None,
    default_priority: float = DEFAULT_PRIORITY,
    default_change_frequency: ChangeFrequency = DEFAULT_CHANGE_FREQUENCY,
) -> PriorityResult:
    """Compute the priority and change frequency for *path*.

    Args:
        path: Canonical URL path (e.g. ``"/docs/setup"``).
        overrides: Pattern -> priority mapping, checked in insertion order.
        default_priority: Priority for paths three or more segments deep.
        default_change_frequency: Change frequency applied to every path.

    """
    return PriorityResult(
        priority=clamp_priority(_priority_for(path, overrides, default_priority)),
        change_frequency=default_change_frequency,
    )


def _priority_for(
    path: str,
    overrides: PriorityOverrides | None,
    default_priority: float,
) -> float:
    if overrides:
        for pattern, priority in overrides.items():
            if matches_pattern(path, pattern):
                return priority

    if path == "/":
        return HOME_PRIORITY

    return _DEPTH_PRIORITIES.get(path_depth(path), default_priority)
