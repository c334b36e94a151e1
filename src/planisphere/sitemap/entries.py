"""URL entries — normalization and per-field default resolution.

An entry is either a bare location string or a :class:`SitemapUrl`.
Optional fields use the :data:`UNSET` sentinel so that an absent field is
distinguishable from any value, ``None`` and ``0`` included.  Resolution
against the batch defaults is therefore a presence check, never a
truthiness check.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from planisphere._errors import EntryError
from planisphere._types import OPTIONAL_FIELDS, UNSET, _Unset

if TYPE_CHECKING:
    from planisphere._types import (
        SitemapChangefreq,
        SitemapLastmod,
        SitemapLoc,
        SitemapPriority,
    )
    from planisphere.config import SitemapDefaults


@dataclass(frozen=True, slots=True)
class SitemapUrl:
    """One page to be listed in a sitemap.

    Attributes:
        loc: Absolute URL, or a path joined to ``base_url``.
        lastmod: Last modification time, or :data:`UNSET`.
        priority: Priority hint, or :data:`UNSET`.
        changefreq: Change frequency hint, or :data:`UNSET`.

    A field explicitly set to ``None`` counts as present: it overrides the
    batch default and the element is left out of the output.

    """

    loc: SitemapLoc
    lastmod: SitemapLastmod | None | _Unset = UNSET
    priority: SitemapPriority | None | _Unset = UNSET
    changefreq: SitemapChangefreq | None | _Unset = UNSET

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> SitemapUrl:
        """Build an entry from a decoded JSON/YAML mapping.

        Keys present in *data* are present on the entry whatever their
        value; unknown keys are ignored.
        """
        if "loc" not in data:
            msg = f"URL entry has no 'loc' key: {dict(data)!r}"
            raise EntryError(msg)
        loc = data["loc"]
        if not isinstance(loc, str):
            msg = f"URL entry 'loc' must be a string, got {type(loc).__name__}"
            raise EntryError(msg)
        fields = {name: data[name] for name in OPTIONAL_FIELDS if name in data}
        return cls(loc=loc, **fields)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class ResolvedFields:
    """Optional fields of an entry after default resolution.

    ``None`` means the element is omitted from the output.
    """

    lastmod: SitemapLastmod | None = None
    priority: SitemapPriority | None = None
    changefreq: SitemapChangefreq | None = None


def as_entry(url: str | SitemapUrl | Mapping[str, object]) -> SitemapUrl:
    """Coerce a bare location, mapping, or entry into a :class:`SitemapUrl`."""
    if isinstance(url, SitemapUrl):
        return url
    if isinstance(url, str):
        return SitemapUrl(loc=url)
    if isinstance(url, Mapping):
        return SitemapUrl.from_mapping(url)
    msg = f"Unsupported URL entry type: {type(url).__name__}"
    raise EntryError(msg)


def join_url(base_url: str, path: str) -> str:
    """Join a slash-trimmed *base_url* and *path* with a single ``/``.

    Either side is dropped when empty, so ``join_url("https://x.com", "")``
    is ``"https://x.com"`` with no trailing slash.
    """
    return "/".join(part for part in (base_url, path) if part)


def normalize_loc(
    loc: str,
    base_url: str = "",
    trailing_slash: bool | None = None,
) -> str:
    """Resolve a raw location into the canonical location string.

    Args:
        loc: Raw location from the entry.
        base_url: Prefix for the location; trailing slashes are stripped.
        trailing_slash: ``True`` forces a trailing slash, ``False`` strips
            one, ``None`` leaves the location as-is.

    Returns:
        The location, not yet percent-encoded.

    """
    if base_url:
        path = loc.removeprefix("/")
        loc = join_url(base_url.rstrip("/"), path)

    if trailing_slash is True and not loc.endswith("/"):
        loc += "/"
    elif trailing_slash is False and loc.endswith("/"):
        loc = loc[:-1]

    return loc


def resolve_fields(entry: SitemapUrl, defaults: SitemapDefaults | None = None) -> ResolvedFields:
    """Resolve the optional fields of *entry* against the batch *defaults*.

    A field present on the entry always wins, even when its value is ``0``
    or ``None``.  Otherwise the default is used when present; otherwise the
    field is omitted.
    """
    resolved: dict[str, object] = {}
    for name in OPTIONAL_FIELDS:
        value = getattr(entry, name)
        if value is UNSET and defaults is not None:
            value = getattr(defaults, name)
        resolved[name] = None if value is UNSET else value
    return ResolvedFields(**resolved)  # type: ignore[arg-type]
