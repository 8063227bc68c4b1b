"""Shared type definitions for routesync."""

from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any, Literal, TypeAlias

# Sitemap change frequency (sitemaps.org vocabulary)
ChangeFrequency: TypeAlias = Literal[
    "always", "hourly", "daily", "weekly", "monthly", "yearly", "never",
]

CHANGE_FREQUENCIES: frozenset[str] = frozenset({
    "always",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "yearly",
    "never",
})

# Exclusion or priority pattern ("/exact", "/prefix/*", "/prefix*")
Pattern: TypeAlias = str

# Items returned by an additional-paths provider
AdditionalPathItem: TypeAlias = Any

# Sync or async callable returning extra routes to include
AdditionalPathsProvider: TypeAlias = Callable[
    [], Iterable[AdditionalPathItem] | Awaitable[Iterable[AdditionalPathItem]]
]

# Ordered pattern -> priority mapping
PriorityOverrides: TypeAlias = Mapping[Pattern, float]
