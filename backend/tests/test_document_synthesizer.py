from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from openai import OpenAIError

from app.exceptions import UpstreamCallFailure, UpstreamConfigurationError
from app.models import ScrapedPage
from app.prompts import CONCISE_SYSTEM_PROMPT, FULL_SYSTEM_PROMPT
from app.services.document_synthesizer import FALLBACK_CONTENT, DocumentSynthesizer

from conftest import chat_completion

PAGES = [
    ScrapedPage(url="https://example.com/", content="# Home"),
    ScrapedPage(url="https://example.com/about", content="# About us"),
]


def _openai_client(response):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=response)
    return client


def test_pages_joined_in_order_with_delimiter(settings):
    synthesizer = DocumentSynthesizer(settings)

    prompt = synthesizer.format_pages_for_prompt(PAGES)

    assert prompt == (
        "URL: https://example.com/\n\n# Home"
        "\n\n---\n\n"
        "URL: https://example.com/about\n\n# About us"
    )


def test_page_content_cap(settings):
    settings.max_page_content_chars = 4
    synthesizer = DocumentSynthesizer(settings)

    prompt = synthesizer.format_pages_for_prompt([ScrapedPage(url="u", content="abcdefgh")])

    assert prompt == "URL: u\n\nabcd..."


def test_user_prompt_names_target_file(settings):
    synthesizer = DocumentSynthesizer(settings)

    _, concise = synthesizer.build_prompts(PAGES, full_version=False)
    _, full = synthesizer.build_prompts(PAGES, full_version=True)

    assert "create an llms.txt file" in concise
    assert "create an llms-full.txt file" in full


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "full_version, system_prompt, max_tokens",
    [(False, CONCISE_SYSTEM_PROMPT, 2000), (True, FULL_SYSTEM_PROMPT, 4000)],
)
async def test_openai_call_uses_mode_template_and_ceiling(
    settings, full_version, system_prompt, max_tokens
):
    client = _openai_client(chat_completion("# Example"))

    with patch("app.services.document_synthesizer.AsyncOpenAI", return_value=client):
        text = await DocumentSynthesizer(settings).synthesize(PAGES, full_version)

    assert text == "# Example"
    kwargs = client.chat.completions.create.await_args.kwargs
    assert kwargs["model"] == "gpt-4-turbo-preview"
    assert kwargs["temperature"] == 0.3
    assert kwargs["max_tokens"] == max_tokens
    assert kwargs["messages"][0] == {"role": "system", "content": system_prompt}
    assert "URL: https://example.com/about" in kwargs["messages"][1]["content"]


@pytest.mark.asyncio
async def test_empty_completion_returns_fallback(settings):
    client = _openai_client(chat_completion(None))

    with patch("app.services.document_synthesizer.AsyncOpenAI", return_value=client):
        text = await DocumentSynthesizer(settings).synthesize(PAGES)

    assert text == FALLBACK_CONTENT


@pytest.mark.asyncio
async def test_openai_error_raises_upstream_call_failure(settings):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(side_effect=OpenAIError("rate limited"))

    with patch("app.services.document_synthesizer.AsyncOpenAI", return_value=client):
        with pytest.raises(UpstreamCallFailure, match="rate limited"):
            await DocumentSynthesizer(settings).synthesize(PAGES)


@pytest.mark.asyncio
async def test_anthropic_provider(settings):
    settings.llm_provider = "anthropic"
    settings.llm_model = "claude-3-haiku-20240307"
    client = MagicMock()
    client.messages.create = AsyncMock(
        return_value=SimpleNamespace(content=[SimpleNamespace(text="# From Claude")])
    )

    with patch("app.services.document_synthesizer.AsyncAnthropic", return_value=client):
        text = await DocumentSynthesizer(settings).synthesize(PAGES, full_version=True)

    assert text == "# From Claude"
    kwargs = client.messages.create.await_args.kwargs
    assert kwargs["system"] == FULL_SYSTEM_PROMPT
    assert kwargs["max_tokens"] == 4000
    assert kwargs["messages"][0]["role"] == "user"


def test_missing_openai_key(settings):
    settings.openai_api_key = None

    with pytest.raises(UpstreamConfigurationError, match="OPENAI_API_KEY"):
        DocumentSynthesizer(settings)


def test_missing_anthropic_key(settings):
    settings.llm_provider = "anthropic"
    settings.anthropic_api_key = None

    with pytest.raises(UpstreamConfigurationError, match="ANTHROPIC_API_KEY"):
        DocumentSynthesizer(settings)


@pytest.mark.asyncio
async def test_anthropic_provider_uses_its_own_default_model(settings):
    settings.llm_provider = "anthropic"
    client = MagicMock()
    client.messages.create = AsyncMock(
        return_value=SimpleNamespace(content=[SimpleNamespace(text="# From Claude")])
    )

    with patch("app.services.document_synthesizer.AsyncAnthropic", return_value=client):
        await DocumentSynthesizer(settings).synthesize(PAGES)

    assert client.messages.create.await_args.kwargs["model"] == "claude-3-haiku-20240307"


def test_explicit_model_overrides_provider_default(settings):
    settings.llm_model = "gpt-4o-mini"

    assert settings.llm_model_name == "gpt-4o-mini"
