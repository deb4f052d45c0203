"""Popularity tiers for deal temperature scores.

Pepper users vote deals up or down; the resulting "temperature" (shown as
``42°``) is mapped to one of four display tiers, each with a colour.
"""

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Tier thresholds (checked in this order, first match wins)
# ---------------------------------------------------------------------------
HOT_THRESHOLD = 1000   # Above this: tier A
WARM_THRESHOLD = 500   # Above this: tier B
COLD_THRESHOLD = 200   # Below this: tier D

TIER_A = "A"
TIER_B = "B"
TIER_C = "C"
TIER_D = "D"

TIER_COLORS = {
    TIER_A: "red",
    TIER_B: "orange",
    TIER_C: "primary-text",
    TIER_D: "blue",
}

DEGREE_SUFFIX = "°"


@dataclass(frozen=True)
class Score:
    """Display form of a deal's points."""

    text: str
    tier: str
    color: str


def classify_points(points: int) -> str:
    """Map a points value to its popularity tier.

    The order matters: 300 is neither above 500 nor below 200, so it lands
    in the default tier C, as do 200 and 500 themselves.

    Args:
        points: Deal temperature

    Returns:
        Tier label ("A", "B", "C" or "D")
    """
    if points > HOT_THRESHOLD:
        return TIER_A
    if points > WARM_THRESHOLD:
        return TIER_B
    if points < COLD_THRESHOLD:
        return TIER_D
    return TIER_C


def tier_color(tier: str) -> str:
    """Return the display colour for a tier."""
    return TIER_COLORS[tier]


def build_score(points: int) -> Score:
    """Build the text and colour shown next to a deal."""
    tier = classify_points(points)
    return Score(text=f"{points}{DEGREE_SUFFIX}", tier=tier, color=tier_color(tier))
