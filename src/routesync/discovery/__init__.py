"""Discovery layer — file tree to canonical URL paths.

Walks a Next.js-style ``app/`` directory and turns every page directory
into a canonical URL path.
"""

from routesync.discovery.normalize import normalize_path
from routesync.discovery.walker import (
    IGNORED_FOLDERS,
    PAGE_FILES,
    RouteCandidate,
    discover_routes,
    find_app_dir,
    iter_candidates,
    should_skip_folder,
)

__all__ = [
    "IGNORED_FOLDERS",
    "PAGE_FILES",
    "RouteCandidate",
    "discover_routes",
    "find_app_dir",
    "iter_candidates",
    "normalize_path",
    "should_skip_folder",
]
