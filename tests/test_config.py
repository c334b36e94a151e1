"""Tests for planisphere.config."""

from pathlib import Path

import pytest

from planisphere._errors import ConfigError
from planisphere._types import UNSET
from planisphere.config import SitemapDefaults, SitemapOptions


class TestSitemapOptions:
    """SitemapOptions — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        options = SitemapOptions()
        assert options.base_url == ""
        assert options.trailing_slash is None
        assert options.pretty is False
        assert options.defaults == SitemapDefaults()
        assert options.output == Path(".")

    def test_frozen(self) -> None:
        options = SitemapOptions()
        with pytest.raises(AttributeError):
            options.pretty = True  # type: ignore[misc]

    def test_stripped_base_url(self) -> None:
        assert SitemapOptions(base_url="https://example.com//").stripped_base_url == "https://example.com"
        assert SitemapOptions().stripped_base_url == ""

    def test_defaults_from_mapping(self) -> None:
        options = SitemapOptions(defaults={"priority": 0.5})  # type: ignore[arg-type]
        assert options.defaults.priority == 0.5
        assert options.defaults.lastmod is UNSET

    def test_output_coerced_to_path(self) -> None:
        options = SitemapOptions(output="public")  # type: ignore[arg-type]
        assert options.output == Path("public")

    def test_non_string_base_url_rejected(self) -> None:
        with pytest.raises(ConfigError, match="base_url"):
            SitemapOptions(base_url=8080)  # type: ignore[arg-type]

    def test_non_bool_trailing_slash_rejected(self) -> None:
        with pytest.raises(ConfigError, match="trailing_slash"):
            SitemapOptions(trailing_slash="yes")  # type: ignore[arg-type]

    def test_non_bool_pretty_rejected(self) -> None:
        with pytest.raises(ConfigError, match="pretty"):
            SitemapOptions(pretty=1)  # type: ignore[arg-type]


class TestSitemapDefaults:
    """SitemapDefaults — fallback metadata."""

    def test_all_unset(self) -> None:
        defaults = SitemapDefaults()
        assert defaults.lastmod is UNSET
        assert defaults.priority is UNSET
        assert defaults.changefreq is UNSET

    def test_from_mapping_ignores_unknown_and_loc(self) -> None:
        defaults = SitemapDefaults.from_mapping({"loc": "/", "changefreq": "weekly", "x": 1})
        assert defaults == SitemapDefaults(changefreq="weekly")

    def test_from_mapping_keeps_explicit_none(self) -> None:
        assert SitemapDefaults.from_mapping({"priority": None}).priority is None

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(ConfigError, match="mapping"):
            SitemapDefaults.from_mapping(["priority"])  # type: ignore[arg-type]
