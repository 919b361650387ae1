# docscraper/errors.py


class DocScraperError(Exception):
    """Base class for errors raised by docscraper."""


class InitializationError(DocScraperError):
    """The browser could not be started, or was used before being started."""


class RenderTimeoutError(DocScraperError):
    """A rendered page never showed a main-content region."""

    def __init__(self, url: str, timeout: int) -> None:
        super().__init__(f"No main content on {url} after {timeout}ms")
        self.url = url
        self.timeout = timeout
