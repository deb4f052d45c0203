"""Manual scraper runner for testing and debugging the Pepper adapter.

Fetches one page of deals and prints them with their score tier.

Usage:
    python scripts/run_scraper.py
    python scripts/run_scraper.py --query "lego"
    python scripts/run_scraper.py --query "lego" --limit 5 --detail
"""

import asyncio
import argparse
import sys
import os

# Add backend to path so we can import pepperdeals without installing it
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from pepperdeals.core.exceptions import ScraperError
from pepperdeals.core.logging import configure_logging
from pepperdeals.scrapers.adapters.pepper import PepperAdapter


async def run_scraper(query: str = "", limit: int = 10, detail: bool = False) -> int:
    """Run the Pepper adapter and display the results.

    Args:
        query: Search text; empty for the front page listing
        limit: Maximum number of deals to display
        detail: Also print old price, user, merchant and description

    Returns:
        Process exit code
    """
    adapter = PepperAdapter()

    print(f"\n{'='*70}")
    print(f"  {adapter.shop_name}: {query or 'front page'}")
    print(f"  {adapter.build_listing_url(query)}")
    print(f"{'='*70}\n")

    try:
        deals = await adapter.fetch_deals(query)
    except ScraperError as e:
        print(f"Error: {e}")
        return 1

    if not deals:
        print("No deals found.\n")
        return 0

    for i, deal in enumerate(deals[:limit], 1):
        print(f"[{i}] {deal.title}")
        print(f"    Price: {deal.price}    Score: {deal.display_score} ({deal.tier}, {deal.color})")
        if detail:
            print(f"    Old price: {deal.old_price}")
            print(f"    User: {deal.user}    Merchant: {deal.merchant}")
            print(f"    Image: {deal.img}")
            print(f"    {deal.description}")
        print(f"    URL: {deal.href}")
        print()

    print(f"Displayed {min(limit, len(deals))} of {len(deals)} deals\n")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Fetch deals from pepper.pl")
    parser.add_argument("--query", "-q", default="", help="Search text (default: front page)")
    parser.add_argument("--limit", "-l", type=int, default=10, help="Number of deals to display")
    parser.add_argument("--detail", "-d", action="store_true", help="Show all deal fields")
    parser.add_argument("--log-level", default=None, help="Log level (default: from settings)")
    args = parser.parse_args()

    configure_logging(args.log_level)
    sys.exit(asyncio.run(run_scraper(args.query, args.limit, args.detail)))


if __name__ == "__main__":
    main()
