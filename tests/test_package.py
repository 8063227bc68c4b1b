"""Tests for routesync package exports and metadata."""

import pytest

import routesync


class TestPackageMetadata:
    """Package-level exports and metadata."""

    def test_version_string(self) -> None:
        assert isinstance(routesync.__version__, str)
        assert "0.1.0" in routesync.__version__

    def test_all_exports_resolvable(self) -> None:
        for name in routesync.__all__:
            getattr(routesync, name)

    def test_lazy_exports_are_the_real_objects(self) -> None:
        from routesync.app import generate
        from routesync.config import SitemapConfig

        assert routesync.SitemapConfig is SitemapConfig
        assert routesync.generate is generate

    def test_invalid_attribute_raises(self) -> None:
        with pytest.raises(AttributeError, match="no attribute"):
            routesync.nonexistent_thing  # type: ignore[attr-defined]  # noqa: B018
