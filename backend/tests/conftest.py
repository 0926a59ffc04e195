"""Shared fixtures and fake collaborators."""

from types import SimpleNamespace

import pytest

from app.config import Settings
from app.exceptions import NoPagesFound, ScrapeFailure, UpstreamCallFailure
from app.models import ScrapedPage


class FakeCrawler:
    """In-memory stand-in for FirecrawlCrawler."""

    def __init__(self, links=None, failing=(), map_error=False):
        self.links = links or []
        self.failing = set(failing)
        self.map_error = map_error
        self.map_calls = []
        self.scrape_calls = []

    async def map_website(self, url, limit):
        self.map_calls.append((url, limit))
        if self.map_error:
            raise NoPagesFound()
        return list(self.links)

    async def scrape_page(self, url):
        self.scrape_calls.append(url)
        if url in self.failing:
            raise ScrapeFailure(url, "timeout")
        return ScrapedPage(url=url, content=f"# Content of {url}", metadata={"title": url})


class FakeSynthesizer:
    """Records synthesize() calls and returns canned text."""

    def __init__(self, text="# Example\n\n> An example site."):
        self.text = text
        self.calls = []

    async def synthesize(self, pages, full_version=False):
        self.calls.append((pages, full_version))
        return self.text


class FailingSynthesizer(FakeSynthesizer):
    """Synthesizer whose completion call always fails."""

    async def synthesize(self, pages, full_version=False):
        self.calls.append((pages, full_version))
        raise UpstreamCallFailure("LLM request failed: model overloaded")


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        firecrawl_api_key="fc-test",
        openai_api_key="sk-test",
        anthropic_api_key="sk-ant-test",
        llm_provider="openai",
        llm_model=None,
    )


@pytest.fixture
def events():
    """Collects progress events; pass ``events.append`` as the callback."""
    return []


def chat_completion(content):
    """Minimal OpenAI chat completion response."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])
