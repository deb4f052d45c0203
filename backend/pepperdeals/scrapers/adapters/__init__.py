"""Site-specific adapter implementations.

Each adapter module implements a class that inherits from BaseAdapter.
"""

from .pepper import PepperAdapter, build_record, extract_deals, parse_deals

__all__ = [
    "PepperAdapter",
    "build_record",
    "extract_deals",
    "parse_deals",
]
