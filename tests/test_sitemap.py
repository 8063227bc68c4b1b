"""Tests for routesync.export.sitemap — sitemap.xml generation."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from xml.etree.ElementTree import fromstring

from routesync.export.sitemap import render_sitemap, write_sitemap
from routesync.manifest.builder import ManifestEntry


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
_NOW = datetime(2026, 3, 9, 18, 30, tzinfo=UTC)


def _entry(url: str, priority: float = 0.8, freq: str = "weekly") -> ManifestEntry:
    """Shorthand for creating ManifestEntry test fixtures."""
    return ManifestEntry(
        url=url,
        last_modified=_NOW,
        change_frequency=freq,  # type: ignore[arg-type]
        priority=priority,
    )


def _parse(xml: str):  # type: ignore[no-untyped-def]
    return fromstring(xml.split("\n", 1)[1])  # skip XML declaration


# ---------------------------------------------------------------------------
# render_sitemap
# ---------------------------------------------------------------------------


class TestRenderSitemap:
    """render_sitemap — XML string generation."""

    def test_valid_xml(self) -> None:
        root = _parse(render_sitemap([_entry("https://example.com/")]))
        assert root.tag == f"{{{_NS}}}urlset"

    def test_declaration(self) -> None:
        xml = render_sitemap([])
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')

    def test_entries_in_order(self) -> None:
        entries = [
            _entry("https://example.com/", 1.0),
            _entry("https://example.com/about", 0.8),
        ]
        root = _parse(render_sitemap(entries))
        locs = [url.find(f"{{{_NS}}}loc").text for url in root.findall(f"{{{_NS}}}url")]
        assert locs == ["https://example.com/", "https://example.com/about"]

    def test_fields(self) -> None:
        root = _parse(render_sitemap([_entry("https://example.com/docs", 0.6, "daily")]))
        url = root.find(f"{{{_NS}}}url")
        assert url.find(f"{{{_NS}}}lastmod").text == "2026-03-09"
        assert url.find(f"{{{_NS}}}changefreq").text == "daily"
        assert url.find(f"{{{_NS}}}priority").text == "0.6"

    def test_priority_formatting(self) -> None:
        root = _parse(render_sitemap([_entry("https://e.com/", 1.0), _entry("https://e.com/x", 0.75)]))
        priorities = [p.text for p in root.iter(f"{{{_NS}}}priority")]
        assert priorities == ["1.0", "0.75"]

    def test_special_characters_escaped(self) -> None:
        xml = render_sitemap([_entry("https://example.com/search?a=1&b=2")])
        assert "&amp;" in xml
        root = _parse(xml)
        assert root.find(f"{{{_NS}}}url/{{{_NS}}}loc").text == "https://example.com/search?a=1&b=2"

    def test_empty(self) -> None:
        root = _parse(render_sitemap([]))
        assert len(root.findall(f"{{{_NS}}}url")) == 0


# ---------------------------------------------------------------------------
# write_sitemap
# ---------------------------------------------------------------------------


class TestWriteSitemap:
    """write_sitemap — file writing."""

    def test_writes_file(self, tmp_path: Path) -> None:
        path = write_sitemap([_entry("https://example.com/")], tmp_path)
        assert path == tmp_path / "sitemap.xml"
        assert path.exists()

    def test_creates_output_dir(self, tmp_path: Path) -> None:
        path = write_sitemap([], tmp_path / "public" / "nested")
        assert path.exists()

    def test_content_matches_render(self, tmp_path: Path) -> None:
        entries = [_entry("https://example.com/")]
        path = write_sitemap(entries, tmp_path)
        assert path.read_text(encoding="utf-8") == render_sitemap(entries)
