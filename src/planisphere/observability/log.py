"""Event log — the record of one sitemap build.

The CLI hands a log to :func:`~planisphere.export.writer.write_sitemaps`
and reads generation and per-file write timings back for the summary.

Thread Safety:
    All methods are protected by a ``threading.Lock``.  Page writes record
    events concurrently from the writer's thread pool.

"""

import threading

from planisphere.observability.events import BuildEvent, SitemapsGenerated, SitemapWritten


class EventLog:
    """Append-only event store, in recording order."""

    __slots__ = ("_events", "_lock")

    def __init__(self) -> None:
        self._events: list[BuildEvent] = []
        self._lock = threading.Lock()

    def append(self, event: BuildEvent) -> None:
        """Record an event in the log."""
        with self._lock:
            self._events.append(event)

    def query(self, *, event_type: type | None = None) -> list[BuildEvent]:
        """Return recorded events, oldest first, optionally of one type."""
        with self._lock:
            events = list(self._events)
        if event_type is None:
            return events
        return [event for event in events if isinstance(event, event_type)]

    def generation(self) -> SitemapsGenerated | None:
        """The most recent generation event, if any."""
        generated = self.query(event_type=SitemapsGenerated)
        return generated[-1] if generated else None  # type: ignore[return-value]

    def write_timings(self) -> dict[str, float]:
        """Milliseconds spent writing each file, keyed by absolute path."""
        return {
            event.path: event.duration_ms
            for event in self.query(event_type=SitemapWritten)
            if isinstance(event, SitemapWritten)
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
