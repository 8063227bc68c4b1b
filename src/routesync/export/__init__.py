"""Export layer — static sitemap.xml output."""

from routesync.export.sitemap import SITEMAP_NS, render_sitemap, write_sitemap

__all__ = ["SITEMAP_NS", "render_sitemap", "write_sitemap"]
