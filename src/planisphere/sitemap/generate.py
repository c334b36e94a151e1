"""Sitemap generation — urlset pages and the sitemap index.

Pure string building: nothing here touches the filesystem.  Entries are
split into pages of at most :data:`MAX_URLS_PER_SITEMAP` URLs, in input
order.  An index is only produced when there are two or more pages.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final

from planisphere.config import SitemapOptions
from planisphere.sitemap.encoding import format_lastmod, format_loc, format_priority, xml_tag
from planisphere.sitemap.entries import SitemapUrl, as_entry, join_url, normalize_loc, resolve_fields

if TYPE_CHECKING:
    from planisphere._types import SitemapLastmod

XML_DECLARATION: Final = '<?xml version="1.0" encoding="UTF-8"?>'
SITEMAP_NS: Final = "http://www.sitemaps.org/schemas/sitemap/0.9"

# Protocol ceiling on URLs per sitemap file
MAX_URLS_PER_SITEMAP: Final = 50_000

type UrlInput = str | SitemapUrl | Mapping[str, object]


def generate_sitemaps(
    urls: Sequence[UrlInput],
    options: SitemapOptions | None = None,
) -> list[str]:
    """Generate the sitemap documents for *urls*.

    Args:
        urls: Bare locations, :class:`SitemapUrl` entries, or mappings.
        options: Batch options; defaults to :class:`SitemapOptions()`.

    Returns:
        One XML string per page.  Empty when *urls* is empty.

    """
    return list(iter_sitemaps(urls, options))


def iter_sitemaps(
    urls: Sequence[UrlInput],
    options: SitemapOptions | None = None,
) -> Iterator[str]:
    """Yield sitemap pages one at a time.

    Restartable: each call produces a fresh iterator over the same pages,
    so a writer can stream pages without holding all of them in memory.
    """
    options = options or SitemapOptions()
    for offset in range(0, len(urls), MAX_URLS_PER_SITEMAP):
        chunk = urls[offset:offset + MAX_URLS_PER_SITEMAP]
        yield _render_urlset(chunk, options)


def page_count(url_count: int) -> int:
    """Number of pages needed for *url_count* URLs (0 for 0)."""
    return -(-url_count // MAX_URLS_PER_SITEMAP)


def generate_sitemap_index(
    filenames: Sequence[str],
    options: SitemapOptions | None = None,
    lastmod: SitemapLastmod | None = None,
) -> str | None:
    """Generate a sitemap index referencing *filenames*.

    Args:
        filenames: Sitemap file names, in page order.
        options: Supplies ``base_url`` and ``pretty``.
        lastmod: Modification time shared by every entry; now if omitted.

    Returns:
        The index document, or *None* when fewer than two filenames are
        given.

    """
    if len(filenames) <= 1:
        return None

    options = options or SitemapOptions()
    nl, tab = _whitespace(options.pretty)
    base_url = options.stripped_base_url
    stamp = format_lastmod(lastmod if lastmod is not None else datetime.now(UTC))

    sitemaps = [
        tab + xml_tag(
            "sitemap",
            nl
            + tab * 2 + xml_tag("loc", join_url(base_url, filename)) + nl
            + tab * 2 + xml_tag("lastmod", stamp) + nl
            + tab,
        )
        for filename in filenames
    ]
    return _wrap("sitemapindex", sitemaps, nl)


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _whitespace(pretty: bool) -> tuple[str, str]:
    return ("\n", "\t") if pretty else ("", "")


def _wrap(root: str, children: list[str], nl: str) -> str:
    return (
        XML_DECLARATION + nl
        + f'<{root} xmlns="{SITEMAP_NS}">' + nl
        + nl.join(children) + nl
        + f"</{root}>"
    )


def _render_urlset(urls: Sequence[UrlInput], options: SitemapOptions) -> str:
    nl, tab = _whitespace(options.pretty)
    base_url = options.stripped_base_url
    inner = tab * 2

    elements: list[str] = []
    for url in urls:
        entry = as_entry(url)
        loc = normalize_loc(entry.loc, base_url, options.trailing_slash)
        fields = resolve_fields(entry, options.defaults)

        children = inner + xml_tag("loc", format_loc(loc)) + nl
        if fields.lastmod is not None:
            children += inner + xml_tag("lastmod", format_lastmod(fields.lastmod)) + nl
        if fields.priority is not None:
            children += inner + xml_tag("priority", format_priority(fields.priority)) + nl
        if fields.changefreq is not None:
            children += inner + xml_tag("changefreq", fields.changefreq) + nl

        elements.append(tab + xml_tag("url", nl + children + tab))

    return _wrap("urlset", elements, nl)
