"""End-to-end llms.txt generation pipeline.

Normalizes the URL, collects page content through the crawler, condenses it
with the LLM and reports progress along the way. Collaborator clients are
built per request from settings; nothing is shared between runs.
"""

import logging

from app.config import Settings
from app.models import CrawlMetadata, CrawlResult
from app.services.crawler_factory import get_crawler_service
from app.services.document_synthesizer import DocumentSynthesizer
from app.services.firecrawl_crawler import FirecrawlCrawler
from app.services.page_collector import PageCollector
from app.services.progress import ProgressCallback, ProgressReporter
from app.services.url_normalizer import normalize_url

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An error occurred"


class LlmsTxtGenerator:
    """Generates an llms.txt or llms-full.txt document for a website."""

    def __init__(
        self,
        crawler: FirecrawlCrawler,
        synthesizer: DocumentSynthesizer,
        settings: Settings,
    ):
        self.crawler = crawler
        self.synthesizer = synthesizer
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> "LlmsTxtGenerator":
        """Build a generator with fresh collaborator clients.

        Raises:
            UpstreamConfigurationError: If a required API key is missing
        """
        return cls(
            crawler=get_crawler_service(settings),
            synthesizer=DocumentSynthesizer(settings),
            settings=settings,
        )

    async def generate(
        self,
        url: str,
        full_version: bool = False,
        on_progress: ProgressCallback | None = None,
    ) -> CrawlResult:
        """Run the whole pipeline for one URL.

        On failure a single ``error`` progress event carrying the exception
        message is emitted before the exception is re-raised.
        """
        reporter = ProgressReporter(on_progress)
        try:
            return await self._run(url, full_version, reporter)
        except Exception as e:
            logger.error(f"Generation failed for {url}: {e}")
            reporter.emit("error", str(e) or DEFAULT_ERROR_MESSAGE)
            raise

    async def _run(self, url: str, full_version: bool, reporter: ProgressReporter) -> CrawlResult:
        normalized_url = normalize_url(url)
        logger.info(
            f"Generating {'llms-full.txt' if full_version else 'llms.txt'} for {normalized_url}"
        )
        reporter.emit("crawling", f"Crawling {normalized_url}...")

        collector = PageCollector(self.crawler, self.settings, reporter)
        collected = await collector.collect(normalized_url, full_version)

        reporter.emit("enhancing", "Enhancing content with AI...")
        content = await self.synthesizer.synthesize(collected.pages, full_version)

        reporter.emit("complete", "Done!")
        return CrawlResult(
            content=content,
            metadata=CrawlMetadata(
                pages_scraped=collected.pages_scraped,
                total_pages=collected.total_pages,
                full_version=full_version,
            ),
        )
