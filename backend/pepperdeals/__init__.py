"""pepperdeals -- deal listings scraped from pepper.pl."""

__version__ = "0.1.0"
