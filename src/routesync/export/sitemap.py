"""Sitemap rendering — produce sitemap.xml from a route manifest.

Writes a standard sitemaps.org ``urlset`` with ``loc``, ``lastmod``,
``changefreq`` and ``priority`` for every manifest entry, in manifest order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement, tostring

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from routesync.manifest.builder import ManifestEntry

# XML namespace for sitemaps
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

SITEMAP_FILENAME = "sitemap.xml"


def render_sitemap(entries: Sequence[ManifestEntry]) -> str:
    """Render manifest entries as a sitemap.xml string.

    Args:
        entries: Manifest entries, already sorted.

    Returns:
        Complete XML string suitable for writing to ``sitemap.xml``.

    """
    urlset = Element("urlset")
    urlset.set("xmlns", SITEMAP_NS)

    for entry in entries:
        url_el = SubElement(urlset, "url")
        SubElement(url_el, "loc").text = entry.url
        SubElement(url_el, "lastmod").text = entry.last_modified.strftime("%Y-%m-%d")
        SubElement(url_el, "changefreq").text = entry.change_frequency
        SubElement(url_el, "priority").text = str(round(entry.priority, 2))

    xml = tostring(urlset, encoding="unicode", xml_declaration=False)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + xml + "\n"


def write_sitemap(entries: Sequence[ManifestEntry], output_dir: Path) -> Path:
    """Write sitemap.xml into *output_dir* (created if missing).

    Returns:
        Path of the written file.

    """
    output_dir.mkdir(parents=True, exist_ok=True)
    sitemap_path = output_dir / SITEMAP_FILENAME
    sitemap_path.write_bytes(render_sitemap(entries).encode("utf-8"))
    return sitemap_path
