"""LLM condensation of scraped pages into an llms.txt document."""

import logging

from anthropic import AnthropicError, AsyncAnthropic
from openai import AsyncOpenAI, OpenAIError

from app.config import Settings
from app.exceptions import UpstreamCallFailure, UpstreamConfigurationError
from app.models import ScrapedPage
from app.prompts import (
    CONCISE_SYSTEM_PROMPT,
    FULL_SYSTEM_PROMPT,
    LLMS_TXT_USER_PROMPT,
    PAGE_DELIMITER,
)

logger = logging.getLogger(__name__)

FALLBACK_CONTENT = "Failed to generate content"


class DocumentSynthesizer:
    """Generates llms.txt / llms-full.txt text from scraped pages."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._openai_client = None
        self._anthropic_client = None

        if settings.llm_provider == "openai" and not settings.openai_api_key:
            raise UpstreamConfigurationError("OPENAI_API_KEY is not set")
        if settings.llm_provider == "anthropic" and not settings.anthropic_api_key:
            raise UpstreamConfigurationError("ANTHROPIC_API_KEY is not set")

    def _get_openai_client(self) -> AsyncOpenAI:
        """Lazy load OpenAI client."""
        if self._openai_client is None:
            self._openai_client = AsyncOpenAI(api_key=self.settings.openai_api_key)
        return self._openai_client

    def _get_anthropic_client(self) -> AsyncAnthropic:
        """Lazy load Anthropic client."""
        if self._anthropic_client is None:
            self._anthropic_client = AsyncAnthropic(api_key=self.settings.anthropic_api_key)
        return self._anthropic_client

    def format_pages_for_prompt(self, pages: list[ScrapedPage]) -> str:
        """Concatenate pages into a single prompt body, in collector order."""
        cap = self.settings.max_page_content_chars
        formatted = []
        for page in pages:
            content = page.content
            if cap and len(content) > cap:
                content = content[:cap].rstrip() + "..."
            formatted.append(f"URL: {page.url}\n\n{content}")
        return PAGE_DELIMITER.join(formatted)

    def build_prompts(self, pages: list[ScrapedPage], full_version: bool) -> tuple[str, str]:
        """Return the (system, user) prompt pair for the given mode."""
        system_prompt = FULL_SYSTEM_PROMPT if full_version else CONCISE_SYSTEM_PROMPT
        user_prompt = LLMS_TXT_USER_PROMPT.format(
            file_name="llms-full.txt" if full_version else "llms.txt",
            pages_content=self.format_pages_for_prompt(pages),
        )
        return system_prompt, user_prompt

    async def _call_openai(self, system_prompt: str, user_prompt: str, max_tokens: int) -> str | None:
        client = self._get_openai_client()
        response = await client.chat.completions.create(
            model=self.settings.llm_model_name,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self.settings.llm_temperature,
            max_tokens=max_tokens,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content

    async def _call_anthropic(self, system_prompt: str, user_prompt: str, max_tokens: int) -> str | None:
        client = self._get_anthropic_client()
        response = await client.messages.create(
            model=self.settings.llm_model_name,
            max_tokens=max_tokens,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
            temperature=self.settings.llm_temperature,
        )
        if not response.content:
            return None
        return getattr(response.content[0], "text", None)

    async def synthesize(self, pages: list[ScrapedPage], full_version: bool = False) -> str:
        """Generate the document text with one completion call.

        Returns:
            Generated text, or FALLBACK_CONTENT if the model returned nothing

        Raises:
            UpstreamCallFailure: If the completion request fails
        """
        system_prompt, user_prompt = self.build_prompts(pages, full_version)
        max_tokens = self.settings.max_tokens(full_version)
        provider = self.settings.llm_provider

        logger.info(
            f"Calling {provider} {self.settings.llm_model_name} "
            f"for {len(pages)} pages (max_tokens={max_tokens})"
        )

        try:
            if provider == "anthropic":
                text = await self._call_anthropic(system_prompt, user_prompt, max_tokens)
            else:
                text = await self._call_openai(system_prompt, user_prompt, max_tokens)
        except (OpenAIError, AnthropicError) as e:
            logger.error(f"{provider} completion failed: {e}")
            raise UpstreamCallFailure(f"LLM request failed: {e}") from e

        return text or FALLBACK_CONTENT
