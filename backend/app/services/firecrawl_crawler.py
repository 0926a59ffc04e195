"""Page discovery and scraping using the Firecrawl API."""

import logging
from typing import Any

from firecrawl import AsyncFirecrawl

from app.config import Settings
from app.exceptions import NoPagesFound, ScrapeFailure, UpstreamConfigurationError
from app.models import ScrapedPage

logger = logging.getLogger(__name__)


class FirecrawlCrawler:
    """Map and scrape websites using Firecrawl API."""

    def __init__(self, settings: Settings):
        """Initialize crawler with settings.

        Args:
            settings: Application settings containing Firecrawl API key

        Raises:
            UpstreamConfigurationError: If FIRECRAWL_API_KEY is not set
        """
        if not settings.firecrawl_api_key:
            raise UpstreamConfigurationError("FIRECRAWL_API_KEY is not set")

        self.client = AsyncFirecrawl(api_key=settings.firecrawl_api_key)

    async def map_website(self, url: str, limit: int) -> list[str]:
        """Get page URLs on a website using Firecrawl /map endpoint.

        Args:
            url: The website URL to map
            limit: Maximum number of URLs to return

        Returns:
            Discovered URLs in the order Firecrawl returned them

        Raises:
            NoPagesFound: If the map request fails
        """
        logger.info(f"Mapping website URLs: {url} (limit {limit})")

        try:
            result = await self.client.map(url, limit=limit)
        except Exception as e:
            logger.error(f"Error mapping {url}: {e}")
            raise NoPagesFound() from e

        # links are LinkResult objects in the v2 SDK, plain strings in older responses
        raw_links = getattr(result, "links", None) or []
        urls = []
        for link in raw_links:
            if isinstance(link, str):
                urls.append(link)
            elif hasattr(link, "url"):
                urls.append(link.url)
            else:
                urls.append(str(link))

        logger.info(f"Map completed: {len(urls)} URLs discovered")
        return urls

    async def scrape_page(self, url: str) -> ScrapedPage:
        """Scrape a single page as markdown.

        Raises:
            ScrapeFailure: If the request fails or returns no markdown
        """
        try:
            doc = await self.client.scrape(url, formats=["markdown"])
        except Exception as e:
            raise ScrapeFailure(url, str(e)) from e

        markdown = getattr(doc, "markdown", None) or ""
        if not markdown:
            raise ScrapeFailure(url, "no markdown content returned")

        return ScrapedPage(
            url=url,
            content=markdown,
            metadata=_metadata_dict(getattr(doc, "metadata", None)),
        )


def _metadata_dict(meta: Any) -> dict[str, Any] | None:
    """Convert Firecrawl document metadata to a plain dict."""
    if meta is None:
        return None
    if isinstance(meta, dict):
        return meta
    if hasattr(meta, "model_dump"):
        return meta.model_dump(exclude_none=True)
    return None
