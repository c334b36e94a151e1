"""Entry sources — read URL entries from a file.

Supported formats, chosen by suffix:
    - ``.json``: a list of location strings and/or entry objects
    - ``.yaml`` / ``.yml``: same shape as JSON
    - anything else: plain text, one location per line; blank lines and
      lines starting with ``#`` are skipped
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from planisphere._errors import EntryError
from planisphere.sitemap.entries import SitemapUrl, as_entry


def load_entries(path: str | Path) -> list[SitemapUrl]:
    """Load URL entries from *path*.

    Raises:
        EntryError: If the file cannot be read or has the wrong shape.

    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read entries from {path}: {exc}"
        raise EntryError(msg) from exc

    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Invalid JSON in {path.name}: {exc}"
            raise EntryError(msg) from exc
    elif suffix in (".yaml", ".yml"):
        try:
            data = yaml.safe_load(text) or []
        except yaml.YAMLError as exc:
            msg = f"Invalid YAML in {path.name}: {exc}"
            raise EntryError(msg) from exc
    else:
        return [
            SitemapUrl(loc=line.strip())
            for line in text.splitlines()
            if line.strip() and not line.lstrip().startswith("#")
        ]

    if not isinstance(data, list):
        msg = f"{path.name} must contain a list of entries, got {type(data).__name__}"
        raise EntryError(msg)
    return [as_entry(item) for item in data]
