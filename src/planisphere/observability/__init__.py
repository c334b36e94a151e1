"""Build observability — structured events for sitemap generation runs.

All events are frozen dataclasses with nanosecond timestamps, safe for
concurrent production from the writer's worker threads.

Quick Start:
    >>> from planisphere.observability import EventLog
    >>> log = EventLog()
    >>> # write_sitemaps(dest, urls, options, event_log=log)
    >>> # log.query(event_type=SitemapWritten)

"""

from planisphere.observability.events import (
    BuildEvent,
    SitemapsGenerated,
    SitemapWritten,
    now_ns,
)
from planisphere.observability.log import EventLog

__all__ = [
    "BuildEvent",
    "EventLog",
    "SitemapWritten",
    "SitemapsGenerated",
    "now_ns",
]
