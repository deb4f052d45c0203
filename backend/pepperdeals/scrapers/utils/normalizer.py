"""Field normalization helpers for scraped deal markup."""

import re
from typing import Optional
from urllib.parse import urljoin

# Placeholder shown when a text field cannot be extracted
FALLBACK_TEXT = "--"

# Thumbnail size tokens in Pepper image URLs
LARGE_THUMBNAIL = "300x300"
SMALL_THUMBNAIL = "100x100"

# Optionally signed ASCII digits, nothing else
POINTS_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def fallback(value: Optional[str], default: str = FALLBACK_TEXT) -> str:
    """Return the trimmed value, or default when it is missing or blank.

    Args:
        value: Raw text or attribute value (may be None)
        default: Replacement for missing/blank values

    Returns:
        Non-empty string when default is non-empty
    """
    if value is None:
        return default
    cleaned = value.strip()
    return cleaned if cleaned else default


def parse_points(raw: Optional[str]) -> int:
    """Parse a vote temperature such as ``"42°"`` into an integer.

    The last character (the degree glyph) is dropped before parsing.
    Missing, empty and non-integer values give 0.

    Args:
        raw: Raw vote text

    Returns:
        Points value
    """
    if raw is None:
        return 0
    cleaned = raw.strip()
    if not cleaned:
        return 0
    number = cleaned[:-1].strip()
    if not POINTS_PATTERN.fullmatch(number):
        return 0
    return int(number)


def shrink_image_url(url: str) -> str:
    """Rewrite a thumbnail URL to the smaller size variant.

    Args:
        url: Image URL, e.g. ``.../300x300/foo.jpg``

    Returns:
        URL with the 300x300 token replaced by 100x100 (unchanged otherwise)
    """
    return url.replace(LARGE_THUMBNAIL, SMALL_THUMBNAIL)


def resolve_url(href: Optional[str], base_url: str) -> str:
    """Resolve a possibly relative link against the site root.

    Args:
        href: Link target from the markup (may be None or blank)
        base_url: Site root, used as-is when href is missing

    Returns:
        Absolute URL
    """
    target = fallback(href, default="")
    if not target:
        return base_url
    return urljoin(base_url + "/", target)
