"""Pytest configuration and shared fixtures."""

import pytest


FULL_DEAL_CARD = """
<article class="thread thread--deal" id="thread_1">
  <img class="thread-image" src="https://static.pepper.pl/threads/raw/abc/1_1/re/300x300/qt/60/1_1.jpg" alt="">
  <span class="cept-vote-temp vote-temp">
    1234°
  </span>
  <a class="thread-link thread-title--list" title="LEGO Technic 42115" href="https://www.pepper.pl/promocje/lego-technic-42115-1">LEGO Technic 42115</a>
  <span class="thread-price text--b">899,99zł<span class="hide">incl.</span></span>
  <span class="mute--text text--lineThrough">1 499,99zł</span>
  <span class="cept-merchant-name">Amazon</span>
  <span class="thread-username">jan_kowalski</span>
  <div class="userHtml-content"><div>Great price for the Lamborghini.<br>Second line</div></div>
</article>
"""


EMPTY_DEAL_CARD = '<article class="thread--deal"></article>'


def listing_page(*cards: str) -> str:
    """Wrap deal cards in a minimal listing page."""
    return (
        "<!DOCTYPE html><html><head><title>Pepper</title></head><body>"
        '<section class="js-threadList">'
        + "".join(cards)
        + "</section></body></html>"
    )


@pytest.fixture
def full_card_html() -> str:
    """Listing page with one fully populated deal card."""
    return listing_page(FULL_DEAL_CARD)


@pytest.fixture
def empty_listing_html() -> str:
    """Listing page with no deal cards (e.g. no search results)."""
    return listing_page('<div class="listLayout-empty">Brak wyników</div>')


@pytest.fixture
def make_listing():
    """Factory building a listing page from raw deal card markup."""
    return listing_page


@pytest.fixture
def full_card() -> str:
    """Markup of one fully populated deal card."""
    return FULL_DEAL_CARD


@pytest.fixture
def empty_card() -> str:
    """Markup of a deal card with no fields at all."""
    return EMPTY_DEAL_CARD
