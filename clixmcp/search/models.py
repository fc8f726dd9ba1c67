"""Data models for catalog search."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class CatalogEntry:
    """One discoverable resource listed in an llms.txt index."""

    title: str
    url: str
    description: str = ""
    category: str | None = None


@dataclass(slots=True)
class Catalog:
    """Entries resolved for a single invocation."""

    entries: list[CatalogEntry] = field(default_factory=list)
    failed_sources: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(slots=True, frozen=True)
class ScoredEntry:
    """Catalog entry with its relevance score."""

    entry: CatalogEntry
    score: float


@dataclass(slots=True)
class FetchResult:
    """Fetched content for a ranked entry."""

    entry: CatalogEntry
    score: float = 0.0
    content: str | None = None
    failed: bool = False
    truncated: bool = False
    language: str = "text"
    error: str | None = None


@dataclass(slots=True)
class SearchReport:
    """Everything needed to render a search response."""

    query: str
    candidate_count: int
    results: list[FetchResult] = field(default_factory=list)
    category: str | None = None
    failed_sources: list[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.results
