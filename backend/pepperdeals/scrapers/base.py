"""Base scraper adapter interface.

Site-specific scrapers inherit from BaseAdapter and return Deal records.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

import httpx
import structlog

from pepperdeals.scrapers.scoring import Score, build_score


@dataclass(frozen=True)
class Deal:
    """One deal listing as shown on the page.

    All text fields hold display strings exactly as found in the markup
    (prices are not parsed into numbers). Missing values are replaced by a
    fallback sentinel, so no field is ever empty.
    """

    title: str
    description: str
    price: str
    old_price: str
    points: int
    href: str
    img: str
    user: str
    merchant: str

    @property
    def score(self) -> Score:
        """Display text, tier and colour derived from points."""
        return build_score(self.points)

    @property
    def display_score(self) -> str:
        return self.score.text

    @property
    def tier(self) -> str:
        return self.score.tier

    @property
    def color(self) -> str:
        return self.score.color


class BaseAdapter(ABC):
    """Abstract base class for deal site adapters.

    Adapters fetch a listing page over HTTP and turn it into Deal records.
    """

    shop_slug: str = ""  # Must be overridden in subclass (e.g., "pepper")
    shop_name: str = ""  # Must be overridden in subclass (e.g., "Pepper.pl")

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        """Initialize the adapter.

        Args:
            http_client: Optional shared client; a short-lived client is
                created per request when omitted
        """
        self.http_client = http_client
        self.logger = structlog.get_logger(adapter=self.shop_slug)

    @abstractmethod
    async def fetch_deals(self, query: str = "") -> List[Deal]:
        """Fetch the deals shown for a search query.

        Args:
            query: Search text; empty string for the front page listing

        Returns:
            List of Deal objects in page order

        Raises:
            ScraperError: If fetching fails after retries
        """
        pass

    async def health_check(self) -> bool:
        """Check if this adapter can reach its site.

        Returns:
            True if healthy, False otherwise
        """
        try:
            await self.fetch_deals()
            return True
        except Exception as e:
            self.logger.error("health_check_failed", error=str(e))
            return False
