"""Shared test fixtures for planisphere."""

from __future__ import annotations

import time
from collections.abc import Iterator
from xml.etree.ElementTree import Element, fromstring

import pytest

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def wrap_sitemap(xml: str | list[str], *, pretty: bool = False) -> str:
    """Wrap url elements in the urlset document the generator produces."""
    return _wrap("urlset", xml, pretty)


def wrap_sitemap_index(xml: str | list[str], *, pretty: bool = False) -> str:
    """Wrap sitemap elements in the sitemapindex document."""
    return _wrap("sitemapindex", xml, pretty)


def _wrap(root: str, xml: str | list[str], pretty: bool) -> str:
    nl = "\n" if pretty else ""
    body = nl.join(xml) if isinstance(xml, list) else xml
    return (
        XML_DECLARATION + nl
        + f'<{root} xmlns="{SITEMAP_NS}">' + nl
        + body + nl
        + f"</{root}>"
    )


def parse(xml: str) -> Element:
    """Parse a generated document (declaration included)."""
    return fromstring(xml.encode("utf-8"))


def locs(xml: str) -> list[str]:
    """Text of every ``loc`` element in document order."""
    return [el.text or "" for el in parse(xml).iter(f"{{{SITEMAP_NS}}}loc")]


@pytest.fixture
def paris_tz(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run the test with the host time zone set to Europe/Paris."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")
    monkeypatch.setenv("TZ", "Europe/Paris")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
