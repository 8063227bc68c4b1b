"""Manifest layer — exclusion, scoring, and ordering of sitemap entries."""

from routesync.manifest.builder import (
    DEFAULT_EXCLUSIONS,
    AdditionalPath,
    ManifestEntry,
    build_manifest,
    effective_exclusions,
)
from routesync.manifest.matching import is_excluded, matches_pattern
from routesync.manifest.priority import PriorityResult, resolve_priority

__all__ = [
    "DEFAULT_EXCLUSIONS",
    "AdditionalPath",
    "ManifestEntry",
    "PriorityResult",
    "build_manifest",
    "effective_exclusions",
    "is_excluded",
    "matches_pattern",
    "resolve_priority",
]
