"""Concurrent content retrieval for ranked entries."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from pathlib import PurePosixPath
from urllib.parse import urlparse

from loguru import logger

from clixmcp.errors import ApiError
from clixmcp.search.http import TextFetcher
from clixmcp.search.models import FetchResult, ScoredEntry

CODE_LANGUAGES: dict[str, str] = {
    ".swift": "swift",
    ".m": "objectivec",
    ".mm": "objectivec",
    ".h": "objectivec",
    ".kt": "kotlin",
    ".kts": "kotlin",
    ".java": "java",
    ".gradle": "groovy",
    ".dart": "dart",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".jsx": "jsx",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".xml": "xml",
    ".plist": "xml",
    ".sh": "bash",
    ".rb": "ruby",
    ".py": "python",
}

DOC_LANGUAGES: dict[str, str] = {
    ".md": "markdown",
    ".mdx": "markdown",
    ".txt": "text",
    ".html": "html",
}

TRUNCATION_NOTICE = "... (truncated for brevity: showing {shown} of {total} characters)"


def detect_language(url: str, languages: Mapping[str, str], default: str) -> str:
    """Map the file extension of ``url`` to a fence tag."""
    suffix = PurePosixPath(urlparse(url).path).suffix.lower()
    return languages.get(suffix, default)


def truncate_content(content: str, max_chars: int) -> tuple[str, bool]:
    """Cut ``content`` to ``max_chars`` and append a notice when it was longer."""
    if len(content) <= max_chars:
        return content, False
    notice = TRUNCATION_NOTICE.format(shown=max_chars, total=len(content))
    return f"{content[:max_chars].rstrip()}\n\n{notice}", True


class ContentFetcher:
    """Fetch the full text behind each selected entry."""

    def __init__(
        self,
        fetcher: TextFetcher,
        *,
        max_chars: int = 6000,
        timeout: float = 10.0,
        languages: Mapping[str, str] | None = None,
        default_language: str = "text",
    ):
        self.fetcher = fetcher
        self.max_chars = max_chars
        self.timeout = timeout
        self.languages = dict(languages) if languages is not None else {**CODE_LANGUAGES, **DOC_LANGUAGES}
        self.default_language = default_language

    async def fetch_all(self, ranked: Sequence[ScoredEntry]) -> list[FetchResult]:
        """Fetch every entry concurrently; results keep the ranked order."""
        if not ranked:
            return []
        return list(await asyncio.gather(*(self.fetch_one(s) for s in ranked)))

    async def fetch_one(self, scored: ScoredEntry) -> FetchResult:
        entry = scored.entry
        result = FetchResult(
            entry=entry,
            score=scored.score,
            language=detect_language(entry.url, self.languages, self.default_language),
        )
        try:
            raw = await asyncio.wait_for(
                self.fetcher.fetch_text(entry.url, timeout=self.timeout),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Content fetch timed out after {}s: {}", self.timeout, entry.url)
            result.failed = True
            result.error = f"timed out after {self.timeout:g}s"
            return result
        except ApiError as e:
            logger.warning("Content fetch failed for {}: {}", entry.url, e)
            result.failed = True
            result.error = f"HTTP {e.status_code}" if e.status_code else str(e)
            return result
        except Exception as e:
            logger.warning("Content fetch failed for {}: {}: {}", entry.url, type(e).__name__, e)
            result.failed = True
            result.error = str(e) or type(e).__name__
            return result

        result.content, result.truncated = truncate_content(raw, self.max_chars)
        return result
