"""
Content negotiation between the JSON response and the explorer page.

Only ``text/html`` and ``application/json`` take part in the decision; every
other media range in the Accept header is ignored and JSON wins by default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

HTML_MEDIA_TYPE = "text/html"
JSON_MEDIA_TYPE = "application/json"

RAW_PARAM = "raw"


@dataclass(frozen=True)
class MediaRange:
    """A single entry of an Accept header."""
    media_type: str
    quality: float = 1.0


def parse_accept(header: Optional[str]) -> list[MediaRange]:
    """
    Parse an Accept header into media ranges, keeping header order.

    Entries with an unparsable or zero quality are dropped.

    Example:
        "text/html;q=0.9, application/json"
        -> [MediaRange("text/html", 0.9), MediaRange("application/json", 1.0)]
    """
    if not header:
        return []

    ranges = []
    for item in header.split(","):
        media_type, *params = item.split(";")
        media_type = media_type.strip().lower()
        if not media_type:
            continue

        quality = _quality(params)
        if quality is None or quality <= 0:
            continue
        ranges.append(MediaRange(media_type, quality))

    return ranges


def _quality(params: list[str]) -> Optional[float]:
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            quality = float(value.strip())
        except ValueError:
            return None
        return quality if 0 <= quality <= 1 else None
    return 1.0


def prefers_html(media_ranges: list[MediaRange]) -> bool:
    """
    Whether HTML is preferred over JSON.

    The candidate with the highest quality wins, ties go to the one listed
    first. Without any candidate JSON wins.
    """
    candidates = [r for r in media_ranges if r.media_type in (HTML_MEDIA_TYPE, JSON_MEDIA_TYPE)]
    if not candidates:
        return False

    # max() keeps the first of equal elements
    best = max(candidates, key=lambda r: r.quality)
    return best.media_type == HTML_MEDIA_TYPE


def can_display_explorer(query_params: Mapping[str, str], accept: Optional[str]) -> bool:
    """
    Whether this request may be answered with the explorer page.

    A ``raw`` query parameter, whatever its value, forces JSON.
    """
    if RAW_PARAM in query_params:
        return False
    return prefers_html(parse_accept(accept))
