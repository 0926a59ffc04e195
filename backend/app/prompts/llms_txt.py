"""Prompts for generating llms.txt and llms-full.txt documents."""

CONCISE_SYSTEM_PROMPT = """You are creating a concise llms.txt file. Provide a clear, brief overview of the website's main purpose, key features, and most important information. Keep it succinct but informative."""

FULL_SYSTEM_PROMPT = """You are creating a comprehensive llms-full.txt file. Include detailed information about the website's content, structure, API endpoints, documentation, and any relevant technical details. Format it clearly with sections and subsections."""

LLMS_TXT_USER_PROMPT = """Based on the following crawled content, create an {file_name} file:

{pages_content}"""

# Separates pages in the combined prompt
PAGE_DELIMITER = "\n\n---\n\n"
