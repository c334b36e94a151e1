"""Shared type definitions for planisphere."""

import enum
from datetime import date
from typing import Final, Literal


class _Unset(enum.Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


# Marks an optional entry field as absent (as opposed to set to a value)
UNSET: Final = _Unset.UNSET

# Optional entry fields, in output order
OPTIONAL_FIELDS: Final = ("lastmod", "priority", "changefreq")

# Location of a page, absolute or relative to the base URL
type SitemapLoc = str

# Last modification time: date value, epoch milliseconds, or date string
type SitemapLastmod = date | int | float | str

# Priority hint, conventionally between 0.0 and 1.0
type SitemapPriority = int | float | str

# Change frequency hint defined by the sitemaps protocol
type SitemapChangefreq = Literal[
    "always", "hourly", "daily", "weekly", "monthly", "yearly", "never",
]

# Kind of file produced by the writer
type SitemapFileKind = Literal["sitemap", "index"]
