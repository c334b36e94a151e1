"""Event model for sitemap builds.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across the writer's
    worker threads.

"""

import time
from dataclasses import dataclass

from planisphere._types import SitemapFileKind


@dataclass(frozen=True, slots=True)
class SitemapsGenerated:
    """Sitemap documents were generated for a batch of URLs.

    Attributes:
        url_count: Number of URL entries in the batch.
        page_count: Number of sitemap documents produced.
        duration_ms: Time spent generating XML in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    url_count: int
    page_count: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class SitemapWritten:
    """A sitemap or sitemap index file was written.

    Attributes:
        path: Absolute path of the written file.
        kind: ``"sitemap"`` for a urlset page, ``"index"`` for the index.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time spent writing in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    kind: SitemapFileKind
    size_bytes: int
    duration_ms: float
    timestamp_ns: int


type BuildEvent = SitemapsGenerated | SitemapWritten


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
