"""Sync layer — best-effort registration of routes with the Portal API."""

from routesync.sync.client import (
    REGISTER_SITEMAP_PATH,
    RegisteredPath,
    SyncOutcome,
    register_endpoint,
    register_paths,
    sync_manifest,
    to_registered_path,
    url_to_path,
)

__all__ = [
    "REGISTER_SITEMAP_PATH",
    "RegisteredPath",
    "SyncOutcome",
    "register_endpoint",
    "register_paths",
    "sync_manifest",
    "to_registered_path",
    "url_to_path",
]
