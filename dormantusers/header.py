"""Parsing of the HTTP ``Link`` header used for API pagination."""

from __future__ import annotations

_NEXT_REL = 'rel="next"'


def get_next_page_url(link_header: str | None) -> str | None:
    """Return the URL marked ``rel="next"`` in a Link header, or None."""
    if not link_header:
        return None
    for link in link_header.split(","):
        parts = link.strip().split(";")
        if len(parts) < 2:
            continue
        url = parts[0].strip("<>")
        if parts[1].strip() == _NEXT_REL:
            return url
    return None