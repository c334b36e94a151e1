"""Sitemap writer — persist generated sitemaps and their index.

File naming:
    - one page: ``sitemap.xml``
    - several pages: ``sitemap-part-01.xml``, ``sitemap-part-02.xml``, ...
      followed by ``sitemap-index.xml`` referencing all of them

Page files are written concurrently; the index is written only once every
page write has finished.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from planisphere._errors import ExportError
from planisphere.config import SitemapOptions
from planisphere.observability.events import SitemapsGenerated, SitemapWritten, now_ns
from planisphere.sitemap.generate import generate_sitemap_index, generate_sitemaps, page_count

if TYPE_CHECKING:
    from collections.abc import Sequence

    from planisphere._types import SitemapFileKind
    from planisphere.observability.log import EventLog
    from planisphere.sitemap.generate import UrlInput

SINGLE_SITEMAP_NAME = "sitemap.xml"
INDEX_NAME = "sitemap-index.xml"


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written by :func:`write_sitemaps`.

    Attributes:
        name: File name relative to the destination directory.
        output_path: Absolute filesystem path to the written file.
        kind: ``"sitemap"`` or ``"index"``.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to write this file.

    """

    name: str
    output_path: Path
    kind: SitemapFileKind
    size_bytes: int
    duration_ms: float


@dataclass(frozen=True, slots=True)
class WriteResult:
    """Aggregate result of a sitemap write.

    Attributes:
        files: All files written, pages first (in order) then the index.
        url_count: Number of URL entries written.
        duration_ms: Total wall-clock time for generation and writing.
        output_dir: Absolute path to the destination directory.

    """

    files: tuple[ExportedFile, ...]
    url_count: int
    duration_ms: float
    output_dir: Path

    @property
    def sitemaps(self) -> tuple[ExportedFile, ...]:
        """Written urlset pages."""
        return tuple(f for f in self.files if f.kind == "sitemap")

    @property
    def index(self) -> ExportedFile | None:
        """The written sitemap index, if any."""
        return next((f for f in self.files if f.kind == "index"), None)


def sitemap_filenames(count: int) -> list[str]:
    """File names for *count* sitemap pages."""
    if count == 1:
        return [SINGLE_SITEMAP_NAME]
    return [f"sitemap-part-{number:02d}.xml" for number in range(1, count + 1)]


def write_sitemaps(
    destination: str | Path,
    urls: Sequence[UrlInput],
    options: SitemapOptions | None = None,
    *,
    event_log: EventLog | None = None,
    max_workers: int | None = None,
) -> WriteResult:
    """Generate sitemaps for *urls* and write them to *destination*.

    Does nothing (and creates nothing) when *urls* is empty.

    Args:
        destination: Directory to write into; created if missing.
        urls: Bare locations, :class:`SitemapUrl` entries, or mappings.
        options: Batch options; defaults to :class:`SitemapOptions()`.
        event_log: Optional log receiving build events.
        max_workers: Thread pool size for page writes (``None`` = default).

    Returns:
        A :class:`WriteResult` describing the written files.

    Raises:
        ExportError: If a file cannot be written.

    """
    start = time.perf_counter()
    options = options or SitemapOptions()
    output_dir = Path(destination).resolve()

    filenames = sitemap_filenames(page_count(len(urls)))
    sitemaps = generate_sitemaps(urls, options)
    if event_log is not None:
        event_log.append(SitemapsGenerated(
            url_count=len(urls),
            page_count=len(filenames),
            duration_ms=(time.perf_counter() - start) * 1000,
            timestamp_ns=now_ns(),
        ))

    if not filenames:
        return WriteResult(files=(), url_count=0, duration_ms=0.0, output_dir=output_dir)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Cannot create sitemap directory {output_dir}: {exc}"
        raise ExportError(msg) from exc

    def write_page(name: str, xml: str) -> ExportedFile:
        return _write_file(output_dir / name, xml, "sitemap", event_log)

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        files = list(pool.map(write_page, filenames, sitemaps))

    index = generate_sitemap_index(filenames, options)
    if index is not None:
        files.append(_write_file(output_dir / INDEX_NAME, index, "index", event_log))

    return WriteResult(
        files=tuple(files),
        url_count=len(urls),
        duration_ms=(time.perf_counter() - start) * 1000,
        output_dir=output_dir,
    )


def _write_file(
    path: Path,
    xml: str,
    kind: SitemapFileKind,
    event_log: EventLog | None,
) -> ExportedFile:
    """Write *xml* as UTF-8 and return its record."""
    t0 = time.perf_counter()
    data = xml.encode("utf-8")
    try:
        path.write_bytes(data)
    except OSError as exc:
        msg = f"Failed to write {path}: {exc}"
        raise ExportError(msg) from exc
    elapsed = (time.perf_counter() - t0) * 1000

    if event_log is not None:
        event_log.append(SitemapWritten(
            path=str(path),
            kind=kind,
            size_bytes=len(data),
            duration_ms=elapsed,
            timestamp_ns=now_ns(),
        ))

    return ExportedFile(
        name=path.name,
        output_path=path,
        kind=kind,
        size_bytes=len(data),
        duration_ms=elapsed,
    )
