"""Pepper.pl deal listing adapter.

Fetches the front page listing (or search results) from pepper.pl and turns
every ``article.thread--deal`` card into a Deal. Cards with broken or missing
markup still produce a record: each field falls back independently.
"""

from typing import List, Optional
from urllib.parse import urlencode

import httpx
import structlog
from bs4.element import Tag

from pepperdeals.config import settings
from pepperdeals.core.exceptions import InvalidDocumentError, ScraperError
from pepperdeals.scrapers import markup
from pepperdeals.scrapers.base import BaseAdapter, Deal
from pepperdeals.scrapers.utils.normalizer import (
    fallback,
    parse_points,
    resolve_url,
    shrink_image_url,
)
from pepperdeals.scrapers.utils.retry import http_retry


logger = structlog.get_logger(__name__)

# Card and field selectors
DEAL_SELECTOR = "article.thread--deal"
LINK_SELECTOR = "a.thread-link"
PRICE_SELECTOR = ".thread-price"
POINTS_SELECTOR = ".cept-vote-temp"
IMAGE_SELECTOR = "img.thread-image"
USER_SELECTOR = "span.thread-username"
MERCHANT_SELECTOR = "span.cept-merchant-name"
OLD_PRICE_SELECTOR = "span.mute--text"
DESCRIPTION_SELECTOR = "div.userHtml-content > div"

SEARCH_PATH = "/search"


def build_record(article: Tag, base_url: Optional[str] = None) -> Deal:
    """Build a Deal from one listing card.

    Args:
        article: Listing card element
        base_url: Site root used to resolve relative links

    Returns:
        Deal with fallback values for anything missing
    """
    base_url = base_url or settings.PEPPER_BASE_URL

    def q(selector: str) -> Optional[Tag]:
        return markup.query_first(article, selector)

    # Title and link share the primary link node
    link = markup.attributes(q(LINK_SELECTOR))
    image = markup.attributes(q(IMAGE_SELECTOR))

    return Deal(
        title=fallback(link.get("title")),
        description=fallback(markup.first_child_text(q(DESCRIPTION_SELECTOR))),
        price=fallback(markup.first_child_text(q(PRICE_SELECTOR))),
        old_price=fallback(markup.text(q(OLD_PRICE_SELECTOR))),
        points=parse_points(markup.text(q(POINTS_SELECTOR))),
        href=resolve_url(link.get("href"), base_url),
        img=shrink_image_url(fallback(image.get("src"))),
        user=fallback(markup.text(q(USER_SELECTOR))),
        merchant=fallback(markup.text(q(MERCHANT_SELECTOR))),
    )


def extract_deals(doc: markup.Document, base_url: Optional[str] = None) -> List[Deal]:
    """Extract every deal card from a parsed listing page, in page order.

    Args:
        doc: Parsed listing page
        base_url: Site root used to resolve relative links

    Returns:
        List of Deal objects (empty when the page has no cards)

    Raises:
        InvalidDocumentError: If doc is not a parsed document
    """
    if not isinstance(doc, Tag):
        raise InvalidDocumentError(doc)

    articles = markup.query_all(doc, DEAL_SELECTOR)
    deals = [build_record(article, base_url) for article in articles]
    logger.debug("pepper_deals_extracted", count=len(deals))
    return deals


def parse_deals(html: str, base_url: Optional[str] = None) -> List[Deal]:
    """Parse a listing page and extract its deals."""
    return extract_deals(markup.parse(html), base_url)


class PepperAdapter(BaseAdapter):
    """Pepper.pl listing and search scraper.

    Uses plain HTTP requests; the listing is server rendered so no browser
    is needed.
    """

    shop_slug = "pepper"
    shop_name = "Pepper.pl"

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
        cookie: Optional[str] = None,
    ):
        """Initialize Pepper adapter.

        Args:
            http_client: Optional shared httpx client
            base_url: Site root, defaults to settings.PEPPER_BASE_URL
            cookie: Cookie header, defaults to settings.PEPPER_COOKIE
        """
        super().__init__(http_client=http_client)
        self.base_url = (base_url or settings.PEPPER_BASE_URL).rstrip("/")
        self.cookie = cookie if cookie is not None else settings.PEPPER_COOKIE
        self._timeout = settings.HTTP_TIMEOUT
        self.logger = logger.bind(adapter=self.shop_slug)

    def build_listing_url(self, query: str = "") -> str:
        """Return the front page URL, or the search URL for a non-empty query.

        Args:
            query: Search text

        Returns:
            Absolute URL
        """
        if not query:
            return f"{self.base_url}/"
        return f"{self.base_url}{SEARCH_PATH}?{urlencode({'q': query})}"

    def _headers(self) -> dict:
        return {
            "cookie": self.cookie,
            "User-Agent": settings.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml",
        }

    @http_retry
    async def _fetch_html(self, url: str) -> str:
        """GET a page and return its decoded body.

        Raises:
            httpx.HTTPStatusError: If the site returns an error status
            httpx.TimeoutException: If request times out
            httpx.NetworkError: If network error occurs
        """
        if self.http_client is not None:
            response = await self.http_client.get(url, headers=self._headers())
        else:
            async with httpx.AsyncClient(
                timeout=self._timeout, follow_redirects=True
            ) as client:
                response = await client.get(url, headers=self._headers())

        response.raise_for_status()
        return response.text

    async def fetch_listing(self, query: str = "") -> str:
        """Fetch the listing page HTML for a query.

        Args:
            query: Search text; empty for the front page

        Returns:
            Page HTML

        Raises:
            ScraperError: If the request fails after retries
        """
        url = self.build_listing_url(query)
        self.logger.info("fetching_pepper_listing", url=url)

        try:
            return await self._fetch_html(url)

        except httpx.HTTPStatusError as e:
            self.logger.error(
                "pepper_http_error",
                status_code=e.response.status_code,
                url=url,
            )
            raise ScraperError(self.shop_slug, f"HTTP {e.response.status_code} for {url}") from e

        except httpx.TimeoutException as e:
            self.logger.error("pepper_timeout", url=url, error=str(e))
            raise ScraperError(self.shop_slug, f"timed out fetching {url}") from e

        except httpx.HTTPError as e:
            self.logger.error("pepper_network_error", url=url, error=str(e))
            raise ScraperError(self.shop_slug, str(e)) from e

    async def fetch_deals(self, query: str = "") -> List[Deal]:
        """Fetch and extract the deals listed for a query.

        Args:
            query: Search text; empty for the front page

        Returns:
            List of Deal objects in page order

        Raises:
            ScraperError: If the page cannot be fetched
        """
        html = await self.fetch_listing(query)
        deals = parse_deals(html, self.base_url)
        self.logger.info("fetched_pepper_deals", query=query, count=len(deals))
        return deals
