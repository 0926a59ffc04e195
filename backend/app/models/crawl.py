"""Request, progress and result types for a single generation run."""

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ProgressStatus = Literal["crawling", "processing", "enhancing", "complete", "error"]


class CrawlRequest(BaseModel):
    """Body of the streaming generation endpoint."""

    url: str | None = None
    full_version: bool = Field(default=False, alias="fullVersion")

    model_config = ConfigDict(populate_by_name=True)


class CrawlProgress(BaseModel):
    """A single progress update emitted while the pipeline runs."""

    status: ProgressStatus
    message: str
    current: int | None = None
    total: int | None = None

    def to_line(self) -> str:
        """Serialize as one newline-terminated JSON line."""
        return self.model_dump_json(exclude_none=True) + "\n"


class CrawlMetadata(BaseModel):
    """Counts reported alongside the generated document."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    pages_scraped: int
    total_pages: int
    full_version: bool


class CrawlResult(BaseModel):
    """Terminal artifact of one generation run."""

    content: str
    metadata: CrawlMetadata | None = None


@dataclass
class ScrapedPage:
    """Markdown content of one successfully scraped page."""
    url: str
    content: str
    metadata: dict[str, Any] | None = None


@dataclass
class CollectedPages:
    """Pages scraped from a site plus the size of the discovered list."""
    pages: list[ScrapedPage] = field(default_factory=list)
    total_pages: int = 0

    @property
    def pages_scraped(self) -> int:
        return len(self.pages)
