"""Scraper utilities for field normalization and retries."""

from .normalizer import (
    FALLBACK_TEXT,
    fallback,
    parse_points,
    shrink_image_url,
    resolve_url,
)
from .retry import http_retry


__all__ = [
    # Normalization
    "FALLBACK_TEXT",
    "fallback",
    "parse_points",
    "shrink_image_url",
    "resolve_url",
    # Retry decorators
    "http_retry",
]
