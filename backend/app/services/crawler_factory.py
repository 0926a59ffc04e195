"""Factory for creating crawler service instances based on configuration."""

import logging

from app.config import Settings
from app.services.firecrawl_crawler import FirecrawlCrawler

logger = logging.getLogger(__name__)


def get_crawler_service(settings: Settings) -> FirecrawlCrawler:
    """Create a crawler client for one request.

    Args:
        settings: Application settings

    Returns:
        A fresh FirecrawlCrawler

    Raises:
        UpstreamConfigurationError: If the Firecrawl API key is missing
    """
    logger.debug("Using Firecrawl crawler backend")
    return FirecrawlCrawler(settings)
