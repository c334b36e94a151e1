"""Planisphere — a straightforward sitemap generator.

Turns a list of URLs into sitemaps.org-compliant XML, split into pages of
at most 50,000 URLs, with a sitemap index whenever more than one page is
needed.

Quick start::

    import planisphere

    planisphere.write_sitemaps("dist/", ["https://example.com", "/about"])

Pure generation, no I/O::

    pages = planisphere.generate_sitemaps(
        ["/", "/about"],
        planisphere.SitemapOptions(base_url="https://example.com"),
    )
    index = planisphere.generate_sitemap_index(["a.xml", "b.xml"])

"""

__version__ = "0.1.0"
__all__ = [
    "MAX_URLS_PER_SITEMAP",
    "SitemapDefaults",
    "SitemapOptions",
    "SitemapUrl",
    "__version__",
    "generate_sitemap_index",
    "generate_sitemaps",
    "load_options",
    "write_sitemaps",
]

_LAZY = {
    "MAX_URLS_PER_SITEMAP": "planisphere.sitemap.generate",
    "SitemapDefaults": "planisphere.config",
    "SitemapOptions": "planisphere.config",
    "SitemapUrl": "planisphere.sitemap.entries",
    "generate_sitemap_index": "planisphere.sitemap.generate",
    "generate_sitemaps": "planisphere.sitemap.generate",
    "load_options": "planisphere.config_loader",
    "write_sitemaps": "planisphere.export.writer",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import planisphere`` fast while providing a clean top-level API.
    """
    module_name = _LAZY.get(name)
    if module_name is not None:
        import importlib

        return getattr(importlib.import_module(module_name), name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
