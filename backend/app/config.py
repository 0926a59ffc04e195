"""Application configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LLM_MODELS = {
    "openai": "gpt-4-turbo-preview",
    "anthropic": "claude-3-haiku-20240307",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "llms.txt Generator"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Page limits per document mode
    concise_page_limit: int = 10
    full_page_limit: int = 100

    # Firecrawl API
    firecrawl_api_key: str | None = None

    # LLM API Keys
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None
    llm_provider: Literal["openai", "anthropic"] = "openai"
    # Unset picks DEFAULT_LLM_MODELS[llm_provider]
    llm_model: str | None = None
    llm_temperature: float = 0.3

    # Output ceilings per document mode
    concise_max_tokens: int = 2000
    full_max_tokens: int = 4000

    # Per-page content cap in the prompt (None sends pages whole)
    max_page_content_chars: int | None = None

    def page_limit(self, full_version: bool) -> int:
        """Page limit passed to discovery for the given mode."""
        return self.full_page_limit if full_version else self.concise_page_limit

    def max_tokens(self, full_version: bool) -> int:
        """Completion output ceiling for the given mode."""
        return self.full_max_tokens if full_version else self.concise_max_tokens

    @property
    def llm_model_name(self) -> str:
        """Configured LLM model, or the default for the selected provider."""
        return self.llm_model or DEFAULT_LLM_MODELS[self.llm_provider]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
