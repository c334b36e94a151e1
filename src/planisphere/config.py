"""Planisphere configuration.

SitemapOptions applies uniformly to a batch of URL entries, frozen after
creation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from planisphere._errors import ConfigError
from planisphere._types import (
    OPTIONAL_FIELDS,
    UNSET,
    SitemapChangefreq,
    SitemapLastmod,
    SitemapPriority,
    _Unset,
)


@dataclass(frozen=True, slots=True)
class SitemapDefaults:
    """Fallback metadata for entries that omit a field.

    Each attribute is :data:`UNSET` unless configured.
    """

    lastmod: SitemapLastmod | None | _Unset = UNSET
    priority: SitemapPriority | None | _Unset = UNSET
    changefreq: SitemapChangefreq | None | _Unset = UNSET

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> SitemapDefaults:
        """Build defaults from a config mapping, ignoring unknown keys."""
        if not isinstance(data, Mapping):
            msg = f"'defaults' must be a mapping, got {type(data).__name__}"
            raise ConfigError(msg)
        return cls(**{name: data[name] for name in OPTIONAL_FIELDS if name in data})  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class SitemapOptions:
    """Configuration for a sitemap generation run.

    Attributes:
        base_url: Prefix joined to every location (and index entry).
            Trailing slashes are ignored.
        trailing_slash: ``True`` forces a trailing slash on every location,
            ``False`` strips it, ``None`` leaves locations untouched.
        defaults: Fallback ``lastmod``/``priority``/``changefreq``.
        pretty: Indent output with tabs and newlines.
        output: Destination directory used by the CLI writer.

    Raises:
        ConfigError: If a field has the wrong type, e.g. a numeric
            ``base_url`` read from a config file.

    """

    base_url: str = ""
    trailing_slash: bool | None = None
    defaults: SitemapDefaults = field(default_factory=SitemapDefaults)
    pretty: bool = False
    output: Path = field(default_factory=lambda: Path("."))

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str):
            msg = f"base_url must be a string, got {type(self.base_url).__name__}"
            raise ConfigError(msg)
        if self.trailing_slash is not None and not isinstance(self.trailing_slash, bool):
            msg = f"trailing_slash must be true, false or unset, got {self.trailing_slash!r}"
            raise ConfigError(msg)
        if not isinstance(self.pretty, bool):
            msg = f"pretty must be true or false, got {self.pretty!r}"
            raise ConfigError(msg)
        # Accept plain mappings from config files and keyword callers.
        if not isinstance(self.defaults, SitemapDefaults):
            object.__setattr__(self, "defaults", SitemapDefaults.from_mapping(self.defaults))
        if not isinstance(self.output, Path):
            object.__setattr__(self, "output", Path(str(self.output)))

    @property
    def stripped_base_url(self) -> str:
        """Base URL without trailing slashes."""
        return self.base_url.rstrip("/")
