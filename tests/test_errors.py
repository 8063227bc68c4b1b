"""Tests for routesync._errors."""

from routesync._errors import (
    ConfigError,
    DiscoveryError,
    ProviderError,
    RouteSyncError,
    SyncError,
)


class TestErrorHierarchy:
    """All routesync errors inherit from RouteSyncError."""

    def test_base_is_exception(self) -> None:
        assert issubclass(RouteSyncError, Exception)

    def test_config_error_inherits(self) -> None:
        assert issubclass(ConfigError, RouteSyncError)

    def test_discovery_error_inherits(self) -> None:
        assert issubclass(DiscoveryError, RouteSyncError)

    def test_provider_error_inherits(self) -> None:
        assert issubclass(ProviderError, RouteSyncError)

    def test_sync_error_inherits(self) -> None:
        assert issubclass(SyncError, RouteSyncError)

    def test_catch_all_routesync_errors(self) -> None:
        """All specific errors are catchable via RouteSyncError."""
        for error_cls in (ConfigError, DiscoveryError, ProviderError, SyncError):
            try:
                raise error_cls("test")
            except RouteSyncError:
                pass  # caught by the base class
