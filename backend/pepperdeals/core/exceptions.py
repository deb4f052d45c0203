"""Custom exception classes for the application."""


class PepperDealsException(Exception):
    """Base exception for all pepperdeals errors."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class InvalidDocumentError(PepperDealsException, TypeError):
    """Raised when extraction is handed something that is not a parsed document."""

    def __init__(self, received: object):
        super().__init__(
            f"Expected a parsed HTML document, got {type(received).__name__}"
        )


class ScraperError(PepperDealsException):
    """Raised when a scraper encounters an error."""

    def __init__(self, platform: str, message: str):
        super().__init__(f"Scraper error for {platform}: {message}")
