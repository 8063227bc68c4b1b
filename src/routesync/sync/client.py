"""Portal sync client — register a route manifest with the Portal API.

Single-attempt, best-effort delivery:

    idle -> requesting -> succeeded | failed

No retries, no backoff.  Every failure (missing key, transport error,
non-2xx status, unreadable body) is logged and reported as an unsuccessful
``SyncOutcome``; nothing is raised to the caller.

Wire format::

    POST <api_url>/api/public/seo/register-sitemap
    x-api-key: <key>
    {"entries": [{"path": "/about", "priority": 0.8, "changefreq": "weekly"}]}

    200 {"created": 3, "updated": 12}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

import httpx

from routesync._errors import SyncError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from routesync.manifest.builder import ManifestEntry

logger = logging.getLogger(__name__)

REGISTER_SITEMAP_PATH = "/api/public/seo/register-sitemap"


@dataclass(frozen=True, slots=True)
class RegisteredPath:
    """One entry of the registration payload."""

    path: str
    priority: float
    changefreq: str

    def to_json(self) -> dict[str, Any]:
        return {"path": self.path, "priority": self.priority, "changefreq": self.changefreq}


@dataclass(frozen=True, slots=True)
class SyncOutcome:
    """Result of one sync attempt.

    Attributes:
        success: True if the Portal accepted the batch.
        created: Paths newly registered by the Portal.
        updated: Paths the Portal already knew and updated.
        error: Human-readable failure reason, or *None*.

    """

    success: bool
    created: int = 0
    updated: int = 0
    error: str | None = None


def register_endpoint(api_url: str) -> str:
    """Full registration URL for a Portal API base URL."""
    return api_url.rstrip("/") + REGISTER_SITEMAP_PATH


def url_to_path(url: str) -> str:
    """Keep only the path component of an absolute URL.

    Strings that are not absolute URLs are treated as paths and given a
    leading ``/`` if missing.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        parts = None
    if parts is not None and parts.scheme and parts.netloc:
        return parts.path or "/"
    return url if url.startswith("/") else "/" + url


def to_registered_path(entry: ManifestEntry) -> RegisteredPath:
    """Convert a manifest entry into its wire-format record."""
    return RegisteredPath(
        path=url_to_path(entry.url),
        priority=entry.priority,
        changefreq=entry.change_frequency,
    )


async def sync_manifest(
    entries: Sequence[ManifestEntry],
    api_url: str,
    api_key: str | None,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> SyncOutcome:
    """Register every manifest entry with the Portal in one request.

    See :func:`register_paths` for the delivery contract.
    """
    return await register_paths(
        [to_registered_path(entry) for entry in entries],
        api_url,
        api_key,
        client=client,
        timeout=timeout,
    )


async def register_paths(
    paths: Sequence[RegisteredPath],
    api_url: str,
    api_key: str | None,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> SyncOutcome:
    """POST *paths* to the Portal registration endpoint.

    Args:
        paths: Wire-format records to register.
        api_url: Portal API base URL.
        api_key: Portal API key.  When missing, no request is made.
        client: Optional shared ``httpx.AsyncClient``.  Not closed here.
        timeout: Request timeout in seconds (default: none).

    Returns:
        A ``SyncOutcome``.  Never raises for network, HTTP, or request-building
        failures.

    """
    if not api_key:
        logger.warning("No API key provided, skipping sitemap sync")
        return SyncOutcome(success=False, error="missing API key")

    endpoint = register_endpoint(api_url)
    payload = {"entries": [p.to_json() for p in paths]}
    headers = {"Content-Type": "application/json", "x-api-key": api_key}

    try:
        if client is not None:
            response = await client.post(endpoint, json=payload, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=timeout) as owned:
                response = await owned.post(endpoint, json=payload, headers=headers)
        return _read_outcome(response)
    except SyncError as exc:
        logger.error("Sitemap sync failed: %s", exc)
        return SyncOutcome(success=False, error=str(exc))
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
        # Header values are ASCII-encoded when the request is built
        logger.error("Sitemap sync error: %s", exc)
        return SyncOutcome(success=False, error=f"{type(exc).__name__}: {exc}")


def _read_outcome(response: httpx.Response) -> SyncOutcome:
    """Interpret the Portal response.

    Raises:
        SyncError: On a non-2xx status or a body that is not a JSON object.

    """
    if not response.is_success:
        msg = f"HTTP {response.status_code}: {response.text}"
        raise SyncError(msg)

    try:
        body = response.json()
    except ValueError as exc:
        msg = f"Invalid JSON in response: {exc}"
        raise SyncError(msg) from exc
    if not isinstance(body, dict):
        msg = f"Unexpected response body: {body!r}"
        raise SyncError(msg)

    return SyncOutcome(
        success=True,
        created=_as_count(body.get("created")),
        updated=_as_count(body.get("updated")),
    )


def _as_count(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0
    return int(value)
