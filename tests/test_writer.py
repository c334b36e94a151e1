"""Tests for planisphere.export.writer — writing sitemap files."""

from __future__ import annotations

from pathlib import Path

import pytest

from planisphere._errors import ExportError
from planisphere.config import SitemapOptions
from planisphere.export.writer import sitemap_filenames, write_sitemaps
from planisphere.observability.events import SitemapsGenerated, SitemapWritten
from planisphere.observability.log import EventLog
from planisphere.sitemap.generate import page_count
from tests.conftest import locs, parse, wrap_sitemap


def _users(count: int) -> list[str]:
    return [f"https://example.com/user/{i + 1}" for i in range(count)]


class TestSitemapFilenames:
    """sitemap_filenames — deterministic naming."""

    def test_single(self) -> None:
        assert sitemap_filenames(1) == ["sitemap.xml"]

    def test_several(self) -> None:
        assert sitemap_filenames(3) == [
            "sitemap-part-01.xml",
            "sitemap-part-02.xml",
            "sitemap-part-03.xml",
        ]

    def test_more_than_ninety_nine(self) -> None:
        assert sitemap_filenames(100)[-1] == "sitemap-part-100.xml"

    def test_zero(self) -> None:
        assert sitemap_filenames(0) == []


class TestWriteSitemaps:
    """write_sitemaps — file output and index emission."""

    def test_nothing_written_for_no_urls(self, tmp_path: Path) -> None:
        result = write_sitemaps(tmp_path, [])

        assert list(tmp_path.iterdir()) == []
        assert result.files == ()
        assert result.index is None

    def test_no_directory_created_for_no_urls(self, tmp_path: Path) -> None:
        write_sitemaps(tmp_path / "out", [])
        assert not (tmp_path / "out").exists()

    def test_single_sitemap(self, tmp_path: Path) -> None:
        result = write_sitemaps(tmp_path, ["https://example.com", "https://example.com/about"])

        assert sorted(p.name for p in tmp_path.iterdir()) == ["sitemap.xml"]
        assert (tmp_path / "sitemap.xml").read_text(encoding="utf-8") == wrap_sitemap(
            "<url><loc>https://example.com</loc></url>"
            "<url><loc>https://example.com/about</loc></url>"
        )
        assert result.url_count == 2
        assert result.index is None
        assert [f.name for f in result.sitemaps] == ["sitemap.xml"]

    def test_several_sitemaps_with_index(self, tmp_path: Path) -> None:
        result = write_sitemaps(tmp_path, _users(70_000))

        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "sitemap-index.xml",
            "sitemap-part-01.xml",
            "sitemap-part-02.xml",
        ]
        assert [f.name for f in result.files] == [
            "sitemap-part-01.xml",
            "sitemap-part-02.xml",
            "sitemap-index.xml",
        ]
        assert result.index is not None
        assert result.index.kind == "index"

    def test_index_references_pages_with_base_url(self, tmp_path: Path) -> None:
        options = SitemapOptions(base_url="https://example.com/")
        write_sitemaps(tmp_path, ["/"] * 50_001, options)

        index = (tmp_path / "sitemap-index.xml").read_text(encoding="utf-8")
        assert locs(index) == [
            "https://example.com/sitemap-part-01.xml",
            "https://example.com/sitemap-part-02.xml",
        ]

    def test_pages_split_contiguously(self, tmp_path: Path) -> None:
        write_sitemaps(tmp_path, _users(50_002))

        first = locs((tmp_path / "sitemap-part-01.xml").read_text(encoding="utf-8"))
        second = locs((tmp_path / "sitemap-part-02.xml").read_text(encoding="utf-8"))
        assert len(first) == 50_000
        assert second == ["https://example.com/user/50001", "https://example.com/user/50002"]

    def test_creates_destination(self, tmp_path: Path) -> None:
        dest = tmp_path / "nested" / "out"
        write_sitemaps(dest, ["https://example.com"])
        assert (dest / "sitemap.xml").is_file()

    def test_file_size_matches(self, tmp_path: Path) -> None:
        result = write_sitemaps(tmp_path, ["https://éléphant.com"])

        exported = result.files[0]
        assert exported.size_bytes == (tmp_path / "sitemap.xml").stat().st_size
        assert exported.output_path == (tmp_path / "sitemap.xml").resolve()

    def test_written_as_utf8_xml(self, tmp_path: Path) -> None:
        write_sitemaps(tmp_path, ["https://example.com"], SitemapOptions(pretty=True))
        root = parse((tmp_path / "sitemap.xml").read_text(encoding="utf-8"))
        assert root.tag.endswith("urlset")

    def test_write_failure_raises_export_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(ExportError):
            write_sitemaps(blocker, ["https://example.com"])


class TestWriterEvents:
    """write_sitemaps — build events recorded in the event log."""

    def test_events_recorded(self, tmp_path: Path) -> None:
        log = EventLog()
        write_sitemaps(tmp_path, _users(50_001), event_log=log)

        generated = log.query(event_type=SitemapsGenerated)
        assert len(generated) == 1
        assert generated[0].url_count == 50_001
        assert generated[0].page_count == 2

        written = log.query(event_type=SitemapWritten)
        assert len(written) == 3
        assert sorted(e.kind for e in written) == ["index", "sitemap", "sitemap"]

    def test_index_written_last(self, tmp_path: Path) -> None:
        log = EventLog()
        write_sitemaps(tmp_path, _users(50_001), event_log=log)

        written = log.query(event_type=SitemapWritten)
        assert written[-1].kind == "index"

    def test_generated_event_for_empty_input(self, tmp_path: Path) -> None:
        log = EventLog()
        write_sitemaps(tmp_path, [], event_log=log)
        assert [type(e) for e in log.query()] == [SitemapsGenerated]
        generated = log.generation()
        assert generated is not None
        assert generated.page_count == 0

    def test_write_timings_cover_every_file(self, tmp_path: Path) -> None:
        log = EventLog()
        result = write_sitemaps(tmp_path, _users(50_001), event_log=log)
        assert set(log.write_timings()) == {str(f.output_path) for f in result.files}

    def test_page_count_matches_files(self, tmp_path: Path) -> None:
        log = EventLog()
        result = write_sitemaps(tmp_path, _users(100_001), event_log=log)
        generated = log.generation()
        assert generated is not None
        assert generated.page_count == page_count(100_001) == len(result.sitemaps) == 3
