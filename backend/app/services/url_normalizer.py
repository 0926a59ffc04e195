"""URL normalization for user-submitted site addresses.

Turns loosely typed input ("example.com", "https:/example.com",
"github.com/owner/repo/tree/main") into an absolute URL. Pure string
handling, no network access.
"""

import re
from urllib.parse import urlparse

# Hosts whose URLs are collapsed to the repository root
SOURCE_HOSTS = ("github.com", "www.github.com")

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
# "https:/host" or "https:host" (missing slashes after the colon)
_BROKEN_SCHEME_RE = re.compile(r"^https?:/?([^/])", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Normalize a raw URL string.

    Steps:
    1. Strip surrounding whitespace
    2. Repair a scheme missing one or both slashes to ``https://``
    3. Prepend ``https://`` when no scheme is present
    4. Collapse source-hosting URLs to ``/owner/repository``

    Normalizing an already normalized URL returns it unchanged.
    """
    url = url.strip()

    url = _BROKEN_SCHEME_RE.sub(r"https://\1", url, count=1)

    if not _SCHEME_RE.match(url):
        url = "https://" + url

    return _collapse_repository_url(url)


def _collapse_repository_url(url: str) -> str:
    """Truncate a source-hosting URL to its repository root."""
    parsed = urlparse(url)
    if parsed.netloc.lower() not in SOURCE_HOSTS:
        return url

    segments = [s for s in parsed.path.split("/") if s]
    if len(segments) < 2:
        return url

    owner, repository = segments[0], segments[1]
    return f"https://github.com/{owner}/{repository}"
