"""Data models for generation runs."""

from app.models.crawl import (
    CollectedPages,
    CrawlMetadata,
    CrawlProgress,
    CrawlRequest,
    CrawlResult,
    ProgressStatus,
    ScrapedPage,
)

__all__ = [
    "CollectedPages",
    "CrawlMetadata",
    "CrawlProgress",
    "CrawlRequest",
    "CrawlResult",
    "ProgressStatus",
    "ScrapedPage",
]
