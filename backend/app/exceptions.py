"""Errors raised by the generation pipeline."""


class GeneratorError(Exception):
    """Base class for llms.txt generation failures."""


class UpstreamConfigurationError(GeneratorError):
    """A collaborator service is missing its API key."""


class NoPagesFound(GeneratorError):
    """Discovery failed or returned no pages."""

    def __init__(self, message: str = "No pages found to crawl"):
        super().__init__(message)


class NoPagesScraped(GeneratorError):
    """Every scrape attempt failed."""

    def __init__(self, message: str = "Failed to crawl any pages"):
        super().__init__(message)


class ScrapeFailure(GeneratorError):
    """A single page could not be scraped. The collector skips it."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to scrape {url}: {reason}")


class UpstreamCallFailure(GeneratorError):
    """The completion service call failed."""
