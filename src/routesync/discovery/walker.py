"""Route discoverer — walk an ``app/`` tree and collect routable pages.

Uses the Next.js app-router file convention:

    app/page.tsx                    -> /
    app/(marketing)/about/page.tsx  -> /about
    app/blog/[slug]/page.tsx        -> skipped (dynamic segment)
    app/_internal/page.tsx          -> skipped (private folder)
    app/api/health/route.ts         -> skipped (ignored folder)

A directory is a page when it directly contains one of the page-marker
files.  Subdirectories are visited in lexical order so the discovered
sequence is reproducible across runs and platforms.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from routesync._errors import DiscoveryError
from routesync.discovery.normalize import normalize_path

logger = logging.getLogger(__name__)

# File names that mark a directory as a routable page
PAGE_FILES: frozenset[str] = frozenset({
    "page.tsx",
    "page.jsx",
    "page.js",
    "page.ts",
})

# Lowercased substrings; any folder whose name contains one is not walked
IGNORED_FOLDERS: tuple[str, ...] = (
    "api",
    "admin",
    "_uptrade",
    "%5fuptrade",
    "uptrade-setup",
    "offline",
    "node_modules",
    ".next",
)

# Candidate content roots, relative to the project root
_APP_DIR_CANDIDATES: tuple[tuple[str, ...], ...] = (
    ("app",),
    ("src", "app"),
)


@dataclass(frozen=True, slots=True)
class RouteCandidate:
    """A directory visited during traversal.

    Attributes:
        relative_dir: POSIX-style path relative to the app root
            (``""`` for the root itself).
        has_page_marker: True if the directory contains a page file.

    """

    relative_dir: str
    has_page_marker: bool

    @property
    def url_path(self) -> str:
        """Canonical URL path for this directory."""
        return normalize_path(self.relative_dir)


def find_app_dir(root: Path | None = None) -> Path:
    """Locate the content root under *root* (default: the working directory).

    Tries ``app/`` first, then ``src/app/``.

    Raises:
        DiscoveryError: If neither directory exists.

    """
    base = root if root is not None else Path.cwd()
    for parts in _APP_DIR_CANDIDATES:
        candidate = base.joinpath(*parts)
        if candidate.is_dir():
            return candidate

    msg = (
        f"Could not find app directory under {base}. "
        'Ensure you have an "app" or "src/app" folder.'
    )
    raise DiscoveryError(msg)


def should_skip_folder(name: str) -> bool:
    """Return True if a subdirectory must not be walked.

    Checked in order: ignored-folder tokens (case-insensitive substring),
    bracketed dynamic segments (``[slug]``), and private ``_`` folders.

    """
    lowered = name.lower()
    if any(ignored in lowered for ignored in IGNORED_FOLDERS):
        return True
    if name.startswith("[") and name.endswith("]"):
        return True
    return name.startswith("_")


def iter_candidates(app_dir: Path, relative_dir: str = "") -> Iterator[RouteCandidate]:
    """Yield a ``RouteCandidate`` for every walked directory, depth-first.

    A directory that vanishes (or was never there) yields nothing.  Any
    other listing failure is logged and treated the same way, so one
    unreadable folder never hides its siblings.
    """
    current = app_dir / relative_dir if relative_dir else app_dir
    try:
        entries = sorted(current.iterdir(), key=lambda p: p.name)
    except (FileNotFoundError, NotADirectoryError):
        return
    except OSError as exc:
        logger.warning("Skipping unreadable directory %s: %s", current, exc)
        return

    has_page = any(entry.name in PAGE_FILES for entry in entries)
    yield RouteCandidate(relative_dir=relative_dir, has_page_marker=has_page)

    for entry in entries:
        if not entry.is_dir() or should_skip_folder(entry.name):
            continue
        child = f"{relative_dir}/{entry.name}" if relative_dir else entry.name
        yield from iter_candidates(app_dir, child)


def discover_routes(app_dir: Path) -> tuple[str, ...]:
    """Return the canonical URL path of every page under *app_dir*.

    Paths appear in traversal order.  Two directories that normalize to the
    same URL (e.g. sibling route groups) produce a single entry.
    """
    seen: set[str] = set()
    routes: list[str] = []
    for candidate in iter_candidates(app_dir):
        if not candidate.has_page_marker:
            continue
        path = candidate.url_path
        if path in seen:
            continue
        seen.add(path)
        routes.append(path)
    return tuple(routes)
