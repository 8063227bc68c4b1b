"""Operator output — phase headers, page previews, and status lines.

Everything is written to stderr.  Detects ``NO_COLOR`` / ``TERM`` for safe
fallback to plain text.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from routesync.sync.client import RegisteredPath


# ---------------------------------------------------------------------------
# ANSI helpers, respecting NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_RED = "\033[31m" if _COLOR else ""

_MARKS: dict[str, tuple[str, str]] = {
    "ok": (_GREEN, "✓"),
    "fail": (_RED, "✗"),
    "warn": (_YELLOW, "!"),
}


def _emit(lines: list[str]) -> None:
    print("\n".join(lines), file=sys.stderr)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def print_header(title: str, *, dry_run: bool = False) -> None:
    """Print a command header, with a dry-run notice if requested."""
    lines = ["", f"  {_BOLD}{title}{_RESET}", ""]
    if dry_run:
        lines.append(f"  {_YELLOW}Running in dry-run mode - no changes will be made{_RESET}")
        lines.append("")
    _emit(lines)


def print_status(kind: str, message: str, detail: str | None = None) -> None:
    """Print a single ``✓`` / ``✗`` / ``!`` status line.

    Args:
        kind: One of ``"ok"``, ``"fail"``, ``"warn"``.
        message: Main status text.
        detail: Optional dimmed second line.

    """
    color, mark = _MARKS.get(kind, (_DIM, "-"))
    lines = [f"  {color}{mark}{_RESET} {message}"]
    if detail:
        lines.append(f"    {_DIM}{detail}{_RESET}")
    _emit(lines)


def print_note(message: str) -> None:
    """Print a highlighted informational line."""
    _emit([f"  {_YELLOW}{message}{_RESET}"])


def print_page_preview(pages: Sequence[RegisteredPath], limit: int = 10) -> None:
    """Print the first *limit* pages that are about to be synced."""
    lines = [f"  {_BOLD}Pages to sync:{_RESET}"]
    lines.extend(
        f"    {_DIM}{page.path} (priority: {page.priority}){_RESET}"
        for page in pages[:limit]
    )
    if len(pages) > limit:
        lines.append(f"    {_DIM}... and {len(pages) - limit} more{_RESET}")
    lines.append("")
    _emit(lines)


def print_build_summary(
    entry_count: int,
    sitemap_path: Path,
    duration_ms: float,
    *,
    sync_scheduled: bool,
) -> None:
    """Print the ``build`` command completion summary."""
    lines = [
        "",
        "─" * 41,
        f"  Generated {entry_count} entr{'ies' if entry_count != 1 else 'y'}",
        f"  Output: {sitemap_path}",
        f"  Portal sync: {'scheduled' if sync_scheduled else 'skipped'}",
        f"  Done in {duration_ms:.0f}ms",
    ]
    _emit(lines)
