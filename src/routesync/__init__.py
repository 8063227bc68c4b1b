"""routesync — static route discovery and Portal sitemap sync.

Walks a Next.js-style ``app/`` directory, turns every page into a canonical
URL, scores it, and registers the resulting manifest with the Portal API.

Quick start::

    from routesync import SitemapConfig, create_sitemap

    sitemap = create_sitemap(SitemapConfig(base_url="https://example.com"))
    entries = await sitemap()

Two entry points share one pipeline::

    await routesync.generate(config)       # Build hook, background sync
    await routesync.sync_pages(".")        # Operator command, awaited sync

Command line::

    routesync sync [--dry-run]
    routesync build --base-url https://example.com

"""

__version__ = "0.1.0"
__all__ = [
    "ManifestEntry",
    "SitemapConfig",
    "SyncOutcome",
    "__version__",
    "build",
    "create_sitemap",
    "generate",
    "sync_pages",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import routesync`` fast (no httpx import until needed).
    """
    if name == "SitemapConfig":
        from routesync.config import SitemapConfig

        return SitemapConfig

    if name == "ManifestEntry":
        from routesync.manifest.builder import ManifestEntry

        return ManifestEntry

    if name == "SyncOutcome":
        from routesync.sync.client import SyncOutcome

        return SyncOutcome

    if name in ("build", "create_sitemap", "generate", "sync_pages"):
        from routesync import app

        return getattr(app, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
