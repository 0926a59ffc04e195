"""Discovers a site's pages and scrapes them one at a time."""

import logging

from app.config import Settings
from app.exceptions import NoPagesFound, NoPagesScraped, ScrapeFailure
from app.models import CollectedPages
from app.services.firecrawl_crawler import FirecrawlCrawler
from app.services.progress import ProgressReporter

logger = logging.getLogger(__name__)


class PageCollector:
    """Collects page content for a site via the crawler service."""

    def __init__(
        self,
        crawler: FirecrawlCrawler,
        settings: Settings,
        reporter: ProgressReporter | None = None,
    ):
        self.crawler = crawler
        self.settings = settings
        self.reporter = reporter or ProgressReporter()

    async def collect(self, url: str, full_version: bool = False) -> CollectedPages:
        """Map the site and scrape every discovered page sequentially.

        Pages that fail to scrape are logged and skipped.

        Args:
            url: Normalized site URL
            full_version: Use the larger page limit for llms-full.txt

        Returns:
            Scraped pages in discovery order and the discovered page count

        Raises:
            NoPagesFound: If discovery fails or returns nothing
            NoPagesScraped: If no page could be scraped
        """
        limit = self.settings.page_limit(full_version)
        links = await self.crawler.map_website(url, limit)
        if not links:
            raise NoPagesFound()

        links = links[:limit]
        total = len(links)
        self.reporter.emit(
            "crawling",
            f"Found {total} pages to process...",
            current=0,
            total=total,
        )

        collected = CollectedPages(total_pages=total)
        for i, link in enumerate(links, 1):
            self.reporter.emit("crawling", f"Scraping {link}...", current=i, total=total)
            try:
                page = await self.crawler.scrape_page(link)
            except ScrapeFailure as e:
                logger.warning(f"Skipping page: {e}")
                continue
            collected.pages.append(page)

        if not collected.pages:
            raise NoPagesScraped()

        logger.info(f"Scraped {collected.pages_scraped} of {total} pages for {url}")
        return collected
