"""XML encoding of sitemap values.

Locations are percent-encoded with the same rule set as a browser's
``encodeURI`` and then XML-escaped.  Dates are printed as UTC ISO-8601 with
millisecond precision.  Nothing here builds elements: :func:`xml_tag` wraps
already-escaped content.

Date parsing caveat:
    Strings without an explicit offset are interpreted in the host's local
    time zone (date-only ISO strings excepted, which are UTC midnight).  The
    same input can therefore print differently on machines configured for
    different zones.  Unparseable strings raise :class:`InvalidDateError`.

"""

from __future__ import annotations

import math
import re
from datetime import UTC, date, datetime
from decimal import Decimal
from email.utils import parsedate_to_datetime
from typing import TYPE_CHECKING, Final
from urllib.parse import quote
from xml.sax.saxutils import escape

from planisphere._errors import InvalidDateError

if TYPE_CHECKING:
    from planisphere._types import SitemapLastmod, SitemapPriority

# Reserved and unreserved characters left untouched by encodeURI, besides
# the alphanumerics and ``_.-~`` that quote() never encodes
_URI_SAFE: Final = ";,/?:@&=+$!*'()#"

# escape() handles & < > on its own
_XML_ENTITIES: Final = {"'": "&apos;", '"': "&quot;"}

# Reduced-precision ISO dates: YYYY and YYYY-MM
_REDUCED_DATE: Final = re.compile(r"(?P<year>\d{4})(?:-(?P<month>\d{2}))?")

# Human-readable formats accepted after ISO-8601 fails, naive = local time
_DATE_FORMATS: Final = (
    "%B %d, %Y %H:%M:%S",
    "%B %d, %Y %H:%M",
    "%B %d, %Y",
    "%b %d, %Y %H:%M:%S",
    "%b %d, %Y",
    "%b %d %Y %H:%M:%S",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
)


def xml_tag(tag: str, contents: str) -> str:
    """Wrap *contents* in ``<tag>…</tag>``.  No escaping is performed."""
    return f"<{tag}>{contents}</{tag}>"


def format_loc(loc: str) -> str:
    """Percent-encode *loc* like ``encodeURI`` then escape XML entities."""
    return escape(quote(loc, safe=_URI_SAFE), _XML_ENTITIES)


def format_lastmod(lastmod: SitemapLastmod) -> str:
    """Format a date, epoch-milliseconds number, or date string.

    Returns:
        UTC timestamp such as ``"1995-12-17T02:24:00.000Z"``.

    Raises:
        InvalidDateError: If the value cannot be turned into a point in time.

    """
    moment = to_utc(lastmod)
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond // 1000:03d}Z"
    )


def format_priority(priority: SitemapPriority) -> str:
    """Format a priority, writing whole-number 0 and 1 with a decimal."""
    if not isinstance(priority, (str, bool)):
        if priority == 0:
            return "0.0"
        if priority == 1:
            return "1.0"
    if isinstance(priority, float):
        return _format_float(priority)
    return str(priority)


def _format_float(value: float) -> str:
    """Write *value* the way JavaScript's ``Number#toString`` does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(repr(value)), "f")
    mantissa, exponent = repr(value).split("e")
    return f"{mantissa}e{int(exponent):+d}"


def to_utc(value: SitemapLastmod) -> datetime:
    """Convert a ``lastmod`` value into an aware UTC datetime."""
    if isinstance(value, datetime):
        # Naive datetimes are taken as local time
        return value.astimezone(UTC)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if isinstance(value, bool):
        msg = f"Invalid lastmod: {value!r}"
        raise InvalidDateError(msg)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            msg = f"Invalid lastmod timestamp: {value!r}"
            raise InvalidDateError(msg) from exc
    if isinstance(value, str):
        return _parse_date_string(value)
    msg = f"Unsupported lastmod type: {type(value).__name__}"
    raise InvalidDateError(msg)


def _parse_date_string(text: str) -> datetime:
    text = text.strip()

    # Date-only ISO forms are UTC midnight
    reduced = _REDUCED_DATE.fullmatch(text)
    if reduced:
        year, month = int(reduced["year"]), int(reduced["month"] or 1)
        try:
            return datetime(year, month, 1, tzinfo=UTC)
        except ValueError as exc:
            msg = f"Invalid lastmod date string: {text!r}"
            raise InvalidDateError(msg) from exc

    try:
        return datetime.combine(date.fromisoformat(text), datetime.min.time(), UTC)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).astimezone(UTC)
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).astimezone(UTC)
        except ValueError:
            continue

    try:
        return parsedate_to_datetime(text).astimezone(UTC)
    except (TypeError, ValueError):
        pass

    msg = f"Invalid lastmod date string: {text!r}"
    raise InvalidDateError(msg)
