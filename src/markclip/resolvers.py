# -*- coding: utf-8 -*-
"""
Resolvers for the special ``date``, ``keywords`` and ``domain`` placeholders.
"""
import json
import logging
import re
from datetime import datetime, timedelta
from typing import Any
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "YYYY-MM-DDTHH:mm:ssZ"
DEFAULT_KEYWORD_SEPARATOR = ", "

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
# Indexed like moment's "d" token: 0 = Sunday
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# Longest tokens first; [bracketed] text is emitted literally
DATE_TOKEN_RE = re.compile(
    r"\[[^\]]*\]"
    r"|YYYY|YY|Q"
    r"|MMMM|MMM|MM|Mo|M"
    r"|DDDD|DDD|DD|Do|D"
    r"|dddd|ddd|dd|d|E"
    r"|HH|H|hh|h|kk|k"
    r"|mm|m|ss|s|SSS|SS|S"
    r"|A|a|ZZ|Z|X|x"
)


def ordinal(number: int) -> str:
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def _utc_offset(moment: datetime, separator: str) -> str:
    offset = moment.utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _date_token(token: str, moment: datetime) -> str:
    hour12 = moment.hour % 12 or 12
    weekday = moment.isoweekday() % 7
    day_of_year = moment.timetuple().tm_yday
    values = {
        "YYYY": lambda: f"{moment.year:04d}",
        "YY": lambda: f"{moment.year % 100:02d}",
        "Q": lambda: str((moment.month - 1) // 3 + 1),
        "MMMM": lambda: MONTH_NAMES[moment.month - 1],
        "MMM": lambda: MONTH_NAMES[moment.month - 1][:3],
        "MM": lambda: f"{moment.month:02d}",
        "Mo": lambda: ordinal(moment.month),
        "M": lambda: str(moment.month),
        "DDDD": lambda: f"{day_of_year:03d}",
        "DDD": lambda: str(day_of_year),
        "DD": lambda: f"{moment.day:02d}",
        "Do": lambda: ordinal(moment.day),
        "D": lambda: str(moment.day),
        "dddd": lambda: DAY_NAMES[weekday],
        "ddd": lambda: DAY_NAMES[weekday][:3],
        "dd": lambda: DAY_NAMES[weekday][:2],
        "d": lambda: str(weekday),
        "E": lambda: str(moment.isoweekday()),
        "HH": lambda: f"{moment.hour:02d}",
        "H": lambda: str(moment.hour),
        "hh": lambda: f"{hour12:02d}",
        "h": lambda: str(hour12),
        "kk": lambda: f"{moment.hour or 24:02d}",
        "k": lambda: str(moment.hour or 24),
        "mm": lambda: f"{moment.minute:02d}",
        "m": lambda: str(moment.minute),
        "ss": lambda: f"{moment.second:02d}",
        "s": lambda: str(moment.second),
        "SSS": lambda: f"{moment.microsecond // 1000:03d}",
        "SS": lambda: f"{moment.microsecond // 10000:02d}",
        "S": lambda: str(moment.microsecond // 100000),
        "A": lambda: "AM" if moment.hour < 12 else "PM",
        "a": lambda: "am" if moment.hour < 12 else "pm",
        "ZZ": lambda: _utc_offset(moment, ""),
        "Z": lambda: _utc_offset(moment, ":"),
        "X": lambda: str(int(moment.timestamp())),
        "x": lambda: str(int(moment.timestamp() * 1000)),
    }
    if token.startswith("["):
        return token[1:-1]
    return values[token]()


def format_date(moment: datetime, fmt: str | None = None) -> str:
    """
    Format ``moment`` with a moment.js-style token string.

    Characters that are not tokens are copied through. Returns "" when
    formatting fails.
    """
    fmt = fmt or DEFAULT_DATE_FORMAT
    try:
        return DATE_TOKEN_RE.sub(lambda m: _date_token(m.group(0), moment), fmt)
    except (ValueError, OverflowError, OSError) as e:
        logger.debug(f"Date formatting failed for {fmt!r}: {e}")
        return ""


def decode_separator(raw: str) -> str:
    """Decode JSON string escapes (\\n, \\t, \\", \\\\) in a keyword separator."""
    try:
        return json.loads('"' + raw.replace('"', '\\"') + '"')
    except ValueError:
        return raw


def join_keywords(keywords: Any, separator: str | None = None) -> str:
    """
    Join a keyword list with ``separator`` (default ", ").

    A non-list value is returned verbatim as a string; a missing value gives "".
    """
    if keywords is None:
        return ""
    if not isinstance(keywords, (list, tuple)):
        return str(keywords)
    sep = decode_separator(separator) if separator else DEFAULT_KEYWORD_SEPARATOR
    return sep.join("" if item is None else str(item) for item in keywords)


def extract_domain(base_uri: Any) -> str:
    """Hostname of ``base_uri``; "" when missing or not an absolute URL."""
    if not base_uri:
        return ""
    try:
        parsed = urlparse(str(base_uri))
        if not parsed.scheme or not parsed.netloc:
            return ""
        return parsed.hostname or ""
    except ValueError as e:
        logger.debug(f"Domain extraction failed for {base_uri!r}: {e}")
        return ""
