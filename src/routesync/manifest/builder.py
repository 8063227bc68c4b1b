"""Manifest builder — discovered and additional routes into sitemap entries.

Pipeline:
    1. Drop discovered paths matching the effective exclusion set
       (built-in defaults plus ``config.exclude``).
    2. Score each surviving path with the priority resolver.
    3. Append routes from ``config.additional_paths`` (if configured).
       A failing provider is logged and skipped; it never aborts the build.
    4. Stable-sort by priority, highest first.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from routesync._errors import ProviderError
from routesync._types import CHANGE_FREQUENCIES
from routesync.manifest.matching import is_excluded
from routesync.manifest.priority import clamp_priority, resolve_priority

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from routesync._types import AdditionalPathsProvider, ChangeFrequency
    from routesync.config import SitemapConfig

logger = logging.getLogger(__name__)

# Reserved namespaces that never appear in a sitemap
DEFAULT_EXCLUSIONS: tuple[str, ...] = (
    "/api/*",
    "/admin/*",
    "/_uptrade/*",
    "/uptrade-setup/*",
    "/offline/*",
)


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """One sitemap entry.

    Attributes:
        url: Absolute URL (base URL + canonical path).
        last_modified: Generation time (UTC).
        change_frequency: Sitemap change frequency.
        priority: Sitemap priority, clamped to ``[0, 1]`` on construction.

    """

    url: str
    last_modified: datetime
    change_frequency: ChangeFrequency
    priority: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", clamp_priority(self.priority))

    def to_dict(self) -> dict[str, Any]:
        """Host-facing mapping (camelCase keys, ISO-8601 timestamp)."""
        return {
            "url": self.url,
            "lastModified": self.last_modified.isoformat(),
            "changeFrequency": self.change_frequency,
            "priority": self.priority,
        }


@dataclass(frozen=True, slots=True)
class AdditionalPath:
    """A route supplied by the caller rather than discovered on disk.

    ``priority`` and ``change_frequency`` are optional; missing values are
    filled in by the priority resolver before the entry is built.
    """

    path: str
    priority: float | None = None
    change_frequency: ChangeFrequency | None = None

    @classmethod
    def coerce(cls, item: object) -> AdditionalPath:
        """Build an ``AdditionalPath`` from a provider item.

        Accepts an ``AdditionalPath``, a mapping with ``path`` and optional
        ``priority`` / ``changeFrequency`` (or ``change_frequency``), or a
        bare path string.

        Raises:
            ProviderError: If the item cannot be interpreted.

        """
        if isinstance(item, cls):
            return item
        if isinstance(item, str):
            return cls(path=item)
        if not isinstance(item, Mapping):
            msg = f"Unsupported additional path item: {item!r}"
            raise ProviderError(msg)

        path = item.get("path")
        if not isinstance(path, str) or not path:
            msg = f"Additional path item is missing a 'path' string: {item!r}"
            raise ProviderError(msg)

        priority = item.get("priority")
        if priority is not None and (
            isinstance(priority, bool) or not isinstance(priority, int | float)
        ):
            msg = f"Additional path {path!r}: priority must be a number, got {priority!r}"
            raise ProviderError(msg)

        freq = item.get("changeFrequency", item.get("change_frequency"))
        if freq is not None and freq not in CHANGE_FREQUENCIES:
            msg = f"Additional path {path!r}: invalid change frequency {freq!r}"
            raise ProviderError(msg)

        return cls(path=path, priority=priority, change_frequency=freq)


def effective_exclusions(config: SitemapConfig) -> tuple[str, ...]:
    """Built-in exclusion defaults followed by the caller's patterns."""
    return DEFAULT_EXCLUSIONS + tuple(config.exclude)


async def build_manifest(
    discovered: Sequence[str],
    config: SitemapConfig,
    *,
    now: datetime | None = None,
) -> list[ManifestEntry]:
    """Build the sorted sitemap manifest.

    Args:
        discovered: Canonical URL paths from the route discoverer.
        config: Sitemap configuration (base URL, exclusions, priorities,
            optional additional-paths provider).
        now: Timestamp for ``last_modified`` (defaults to the current time).

    Returns:
        Entries sorted by priority, highest first.  Entries of equal
        priority keep their insertion order, discovered routes first.

    """
    timestamp = now if now is not None else datetime.now(UTC)
    exclusions = effective_exclusions(config)

    entries: list[ManifestEntry] = []
    for path in discovered:
        if is_excluded(path, exclusions):
            logger.debug("Excluded discovered route %s", path)
            continue
        scored = resolve_priority(
            path,
            config.priorities,
            config.default_priority,
            config.default_change_frequency,
        )
        entries.append(ManifestEntry(
            url=config.base_url + path,
            last_modified=timestamp,
            change_frequency=scored.change_frequency,
            priority=scored.priority,
        ))

    if config.additional_paths is not None:
        entries.extend(await _additional_entries(
            config.additional_paths, config, exclusions, timestamp,
        ))

    entries.sort(key=lambda entry: entry.priority, reverse=True)
    return entries


async def _additional_entries(
    provider: AdditionalPathsProvider,
    config: SitemapConfig,
    exclusions: tuple[str, ...],
    timestamp: datetime,
) -> list[ManifestEntry]:
    """Call the additional-paths provider and build entries for its items."""
    try:
        items = await _call_provider(provider)
    except ProviderError as exc:
        logger.warning("Failed to get additional paths: %s", exc)
        return []

    entries: list[ManifestEntry] = []
    for item in items:
        try:
            extra = AdditionalPath.coerce(item)
        except ProviderError as exc:
            logger.warning("Skipping additional path: %s", exc)
            continue

        path = extra.path if extra.path.startswith("/") else "/" + extra.path
        if is_excluded(path, exclusions):
            logger.debug("Excluded additional route %s", path)
            continue

        scored = resolve_priority(
            path,
            config.priorities,
            config.default_priority,
            config.default_change_frequency,
        )
        entries.append(ManifestEntry(
            url=config.base_url + path,
            last_modified=timestamp,
            change_frequency=extra.change_frequency or scored.change_frequency,
            priority=extra.priority if extra.priority is not None else scored.priority,
        ))
    return entries


async def _call_provider(provider: AdditionalPathsProvider) -> Iterable[object]:
    """Invoke the provider, awaiting it if needed.

    Raises:
        ProviderError: Wrapping any exception raised by the provider, or if
            it returns something other than a list of items (a string or a
            single mapping included).

    """
    try:
        result = provider()
        if inspect.isawaitable(result):
            result = await result
    except Exception as exc:
        msg = f"additional_paths provider raised {type(exc).__name__}: {exc}"
        raise ProviderError(msg) from exc

    if result is None:
        return ()
    if isinstance(result, str | bytes | Mapping) or not hasattr(result, "__iter__"):
        msg = f"additional_paths provider returned {type(result).__name__}, expected a list"
        raise ProviderError(msg)
    try:
        return list(result)
    except Exception as exc:
        msg = f"additional_paths provider result could not be read: {exc}"
        raise ProviderError(msg) from exc
