"""routesync entry points — sitemap generator, sync command, and static build.

Both variants share discovery, scoring and the sync client; they differ in
output and in whether the Portal sync is awaited:

    generate()    Build-time hook.  Returns the manifest immediately and
                  syncs in the background (fire-and-forget).
    sync_pages()  Operator command.  Prints progress and awaits the sync.
    build()       Runs ``generate()`` and writes sitemap.xml to disk.
"""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path
from typing import TYPE_CHECKING

from routesync._errors import ConfigError, DiscoveryError
from routesync.config_loader import load_config, resolve_api_key, resolve_api_url
from routesync.discovery.walker import discover_routes, find_app_dir
from routesync.manifest.builder import build_manifest
from routesync.manifest.priority import resolve_priority
from routesync.sync.client import RegisteredPath, SyncOutcome, register_paths, sync_manifest

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    import httpx

    from routesync.config import SitemapConfig
    from routesync.manifest.builder import ManifestEntry

logger = logging.getLogger(__name__)

# The sync command only reads the server-side key
COMMAND_API_KEY_ENV_VARS: tuple[str, ...] = ("UPTRADE_API_KEY",)

PREVIEW_LIMIT = 10

# Strong references to in-flight background syncs, dropped on completion
_background_syncs: set[asyncio.Task[SyncOutcome]] = set()


# ---------------------------------------------------------------------------
# Generator variant
# ---------------------------------------------------------------------------


def discover_or_home(root: Path) -> tuple[str, ...]:
    """Discover routes under *root*, falling back to just ``/``.

    A missing content root is logged and never fails sitemap generation.
    """
    try:
        return discover_routes(find_app_dir(root))
    except DiscoveryError as exc:
        logger.warning("Failed to discover pages: %s", exc)
        return ("/",)


async def generate(
    config: SitemapConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> list[ManifestEntry]:
    """Build the sitemap manifest and start a background Portal sync.

    The returned manifest never waits on the Portal: sync runs as a separate
    task (see :func:`background_syncs`) unless ``config.disable_sync`` is set
    or no API key is configured.

    Raises:
        ConfigError: If ``config.base_url`` is empty.

    """
    if not config.base_url:
        msg = "base_url is required to generate a sitemap"
        raise ConfigError(msg)

    discovered = discover_or_home(config.root)
    entries = await build_manifest(discovered, config)
    logger.info("Generated sitemap with %d pages", len(entries))

    if not config.disable_sync:
        schedule_sync(entries, config, client=client)

    return entries


def create_sitemap(
    config: SitemapConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> Callable[[], Awaitable[list[ManifestEntry]]]:
    """Return a zero-argument async sitemap hook bound to *config*."""

    async def sitemap() -> list[ManifestEntry]:
        return await generate(config, client=client)

    return sitemap


def schedule_sync(
    entries: Sequence[ManifestEntry],
    config: SitemapConfig,
    *,
    client: httpx.AsyncClient | None = None,
) -> asyncio.Task[SyncOutcome] | None:
    """Start a fire-and-forget Portal sync for *entries*.

    Must be called from a running event loop.  Returns the task, or *None*
    when no API key could be resolved.
    """
    api_key = resolve_api_key(config.api_key)
    if not api_key:
        logger.info("No API key found, skipping Portal API sync")
        return None

    api_url = resolve_api_url(config.api_url)
    task = asyncio.create_task(
        sync_manifest(list(entries), api_url, api_key, client=client),
        name="routesync-portal-sync",
    )
    _background_syncs.add(task)
    task.add_done_callback(_on_sync_done)
    return task


def _on_sync_done(task: asyncio.Task[SyncOutcome]) -> None:
    _background_syncs.discard(task)
    if task.cancelled():
        logger.warning("Portal sync was cancelled")
        return
    exc = task.exception()
    if exc is not None:
        logger.warning("Failed to sync sitemap to Portal API: %s", exc)
        return
    outcome = task.result()
    if outcome.success:
        logger.info(
            "Synced to Portal API: %d created, %d updated",
            outcome.created, outcome.updated,
        )


def background_syncs() -> frozenset[asyncio.Task[SyncOutcome]]:
    """Background sync tasks that have not finished yet."""
    return frozenset(_background_syncs)


async def drain_background_syncs() -> list[SyncOutcome]:
    """Wait for all pending background syncs and return their outcomes."""
    pending = list(_background_syncs)
    if not pending:
        return []
    results = await asyncio.gather(*pending, return_exceptions=True)
    return [r for r in results if isinstance(r, SyncOutcome)]


# ---------------------------------------------------------------------------
# Command variant
# ---------------------------------------------------------------------------


def discover_page_records(app_dir: Path) -> list[RegisteredPath]:
    """Discover pages and score them with the default priority tiers."""
    records: list[RegisteredPath] = []
    for path in discover_routes(app_dir):
        scored = resolve_priority(path)
        records.append(RegisteredPath(
            path=path,
            priority=scored.priority,
            changefreq=scored.change_frequency,
        ))
    return records


async def sync_pages(
    root: str | Path = ".",
    *,
    api_url: str | None = None,
    api_key: str | None = None,
    pages: bool = True,
    blog: bool = False,
    schemas: bool = False,
    dry_run: bool = False,
    preview_limit: int = PREVIEW_LIMIT,
    client: httpx.AsyncClient | None = None,
) -> SyncOutcome | None:
    """Discover pages under *root* and register them with the Portal.

    Prints progress to stderr and waits for the sync to finish.

    Returns:
        The sync outcome, or *None* if nothing was sent (dry run, pages
        disabled, or no app directory).

    Raises:
        ConfigError: If no API key is given or found in ``UPTRADE_API_KEY``.

    """
    from routesync.banner import print_header, print_note, print_status

    key = resolve_api_key(api_key, env_vars=COMMAND_API_KEY_ENV_VARS)
    if not key:
        msg = "Missing UPTRADE_API_KEY"
        raise ConfigError(msg)
    url = resolve_api_url(api_url)

    print_header("routesync sync", dry_run=dry_run)

    outcome: SyncOutcome | None = None
    if pages:
        outcome = await _sync_page_routes(
            Path(root), url, key,
            dry_run=dry_run, preview_limit=preview_limit, client=client,
        )

    if blog:
        print_note("Blog sync coming soon")
        print_status("warn", "Blog posts are not synced", "Manage blog posts in the Portal.")

    if schemas:
        print_note("Schema sync coming soon")
        print_status("warn", "Schema markup is not synced", "Manage schemas in the Portal.")

    return outcome


async def _sync_page_routes(
    root: Path,
    api_url: str,
    api_key: str,
    *,
    dry_run: bool,
    preview_limit: int,
    client: httpx.AsyncClient | None,
) -> SyncOutcome | None:
    from routesync.banner import print_note, print_page_preview, print_status

    try:
        app_dir = find_app_dir(root)
    except DiscoveryError as exc:
        print_status("fail", "Could not find app directory", str(exc))
        return None

    records = discover_page_records(app_dir)
    print_status("ok", f"Found {len(records)} pages")
    print_page_preview(records, limit=preview_limit)

    if dry_run:
        print_note(f"[DRY RUN] Would sync {len(records)} pages")
        return None

    outcome = await register_paths(records, api_url, api_key, client=client)
    if outcome.success:
        print_status(
            "ok",
            f"Synced pages: {outcome.created} created, {outcome.updated} updated",
        )
    else:
        print_status("fail", f"Sync failed: {outcome.error or 'unknown error'}")
    return outcome


# ---------------------------------------------------------------------------
# Static build
# ---------------------------------------------------------------------------


def build(root: str | Path = ".", output: str | Path = "public", **kwargs: object) -> Path:
    """Generate the manifest and write sitemap.xml.

    Background Portal sync (if enabled) is allowed to finish before this
    function returns, since the event loop closes afterwards.

    Args:
        root: Project root containing ``app/`` or ``src/app/``.
        output: Output directory, relative to *root* unless absolute.
        **kwargs: Override SitemapConfig fields.

    Returns:
        Path of the written sitemap.

    """
    from routesync.banner import print_build_summary

    config = load_config(Path(root), **kwargs)
    output_dir = Path(output)
    if not output_dir.is_absolute():
        output_dir = config.root / output_dir

    t0 = time.perf_counter()
    sitemap_path, entry_count, scheduled = asyncio.run(_build_async(config, output_dir))
    duration_ms = (time.perf_counter() - t0) * 1000

    print_build_summary(entry_count, sitemap_path, duration_ms, sync_scheduled=scheduled)
    return sitemap_path


async def _build_async(config: SitemapConfig, output_dir: Path) -> tuple[Path, int, bool]:
    from routesync.export.sitemap import write_sitemap

    entries = await generate(config)
    scheduled = bool(background_syncs())
    sitemap_path = write_sitemap(entries, output_dir)
    await drain_background_syncs()
    return sitemap_path, len(entries), scheduled
