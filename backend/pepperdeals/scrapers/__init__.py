"""Scraper system for fetching deals from deal-sharing sites.

This package provides:
- Markup parsing helpers over BeautifulSoup
- The Deal record and base adapter class
- Popularity tier scoring
- The pepper.pl adapter and its extraction functions
"""

from .base import BaseAdapter, Deal
from .scoring import Score, build_score, classify_points
from .adapters import PepperAdapter, extract_deals, parse_deals

__all__ = [
    # Base classes
    "BaseAdapter",
    # Data structures
    "Deal",
    "Score",
    # Scoring
    "build_score",
    "classify_points",
    # Adapters
    "PepperAdapter",
    "extract_deals",
    "parse_deals",
]
