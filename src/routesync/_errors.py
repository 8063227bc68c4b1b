"""routesync error hierarchy.

All routesync-specific errors inherit from RouteSyncError for easy catching.
"""


class RouteSyncError(Exception):
    """Base error for all routesync operations."""


class ConfigError(RouteSyncError):
    """Invalid or missing configuration (base URL, API key, defaults)."""


class DiscoveryError(RouteSyncError):
    """The content root (``app/`` or ``src/app/``) could not be found."""


class ProviderError(RouteSyncError):
    """An additional-paths provider raised or returned unusable data."""


class SyncError(RouteSyncError):
    """Registration request failed (transport, HTTP status, or body)."""
