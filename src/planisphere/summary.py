"""Build summary — status output after writing sitemaps.

Prints the written files with sizes and, given the build's event log,
generation and per-file write timings.  Detects ``NO_COLOR`` /
``TERM`` for safe fallback.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from planisphere.export.writer import WriteResult
    from planisphere.observability.log import EventLog


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""


def _format_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def format_summary(result: WriteResult, event_log: EventLog | None = None) -> str:
    """Render the build summary for *result* as text.

    When *event_log* holds the build's events, the generation time and the
    time spent writing each file are reported as well.
    """
    from planisphere import __version__

    lines: list[str] = [
        "",
        f"  {_BOLD}Planisphere{_RESET} {_DIM}v{__version__}{_RESET}",
        f"  {_DIM}{'─' * 43}{_RESET}",
    ]

    if not result.files:
        lines.append(f"  {_YELLOW}!{_RESET} no URLs given, nothing written")
        lines.append("")
        return "\n".join(lines)

    urls_label = "URL" if result.url_count == 1 else "URLs"
    lines.append(
        f"  {_DIM}├─{_RESET} {result.url_count} {urls_label} "
        f"{_DIM}in {result.duration_ms:.0f}ms{_RESET}"
    )

    timings: dict[str, float] = {}
    if event_log is not None:
        generated = event_log.generation()
        if generated is not None:
            pages_label = "page" if generated.page_count == 1 else "pages"
            lines.append(
                f"  {_DIM}├─{_RESET} {generated.page_count} {pages_label} generated "
                f"{_DIM}in {generated.duration_ms:.1f}ms{_RESET}"
            )
        timings = event_log.write_timings()

    for exported in result.files:
        marker = f"{_GREEN}index{_RESET} " if exported.kind == "index" else ""
        detail = _format_size(exported.size_bytes)
        elapsed = timings.get(str(exported.output_path))
        if elapsed is not None:
            detail += f", {elapsed:.1f}ms"
        lines.append(f"  {_DIM}├─{_RESET} {marker}{exported.name} {_DIM}({detail}){_RESET}")
    lines.append(f"  {_DIM}└─{_RESET} output: {_DIM}{result.output_dir}{_RESET}")
    lines.append("")
    return "\n".join(lines)


def print_summary(
    result: WriteResult,
    stream: TextIO | None = None,
    event_log: EventLog | None = None,
) -> None:
    """Print the build summary to *stream* (stderr by default)."""
    print(format_summary(result, event_log), file=stream or sys.stderr)
