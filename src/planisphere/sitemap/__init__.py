"""Sitemap core — entry normalization, XML encoding, pagination, index.

Every function in this package is pure: inputs in, XML strings out.
Writing files is the job of :mod:`planisphere.export`.
"""

from planisphere.sitemap.entries import SitemapUrl, normalize_loc, resolve_fields
from planisphere.sitemap.generate import (
    MAX_URLS_PER_SITEMAP,
    SITEMAP_NS,
    generate_sitemap_index,
    generate_sitemaps,
    iter_sitemaps,
)

__all__ = [
    "MAX_URLS_PER_SITEMAP",
    "SITEMAP_NS",
    "SitemapUrl",
    "generate_sitemap_index",
    "generate_sitemaps",
    "iter_sitemaps",
    "normalize_loc",
    "resolve_fields",
]
