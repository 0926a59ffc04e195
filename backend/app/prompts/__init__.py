"""LLM prompts for document generation."""

from app.prompts.llms_txt import (
    CONCISE_SYSTEM_PROMPT,
    FULL_SYSTEM_PROMPT,
    LLMS_TXT_USER_PROMPT,
    PAGE_DELIMITER,
)

__all__ = [
    "CONCISE_SYSTEM_PROMPT",
    "FULL_SYSTEM_PROMPT",
    "LLMS_TXT_USER_PROMPT",
    "PAGE_DELIMITER",
]
