"""Planisphere error hierarchy.

All planisphere-specific errors inherit from PlanisphereError for easy catching.
"""


class PlanisphereError(Exception):
    """Base error for all planisphere operations."""


class ConfigError(PlanisphereError):
    """Invalid or unreadable configuration."""


class EntryError(PlanisphereError):
    """Malformed URL entry or entry source."""


class InvalidDateError(PlanisphereError, ValueError):
    """A ``lastmod`` value could not be parsed into a point in time."""


class ExportError(PlanisphereError):
    """Error while writing sitemap files."""
