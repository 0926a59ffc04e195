"""Business logic services."""

from app.services.crawler_factory import get_crawler_service
from app.services.document_synthesizer import DocumentSynthesizer
from app.services.firecrawl_crawler import FirecrawlCrawler
from app.services.generator import LlmsTxtGenerator
from app.services.page_collector import PageCollector
from app.services.progress import ProgressCallback, ProgressReporter
from app.services.url_normalizer import normalize_url

__all__ = [
    "DocumentSynthesizer",
    "FirecrawlCrawler",
    "LlmsTxtGenerator",
    "PageCollector",
    "ProgressCallback",
    "ProgressReporter",
    "get_crawler_service",
    "normalize_url",
]
