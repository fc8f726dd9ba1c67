"""Field-weighted BM25 ranking over catalog entries."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from clixmcp.search.models import CatalogEntry, ScoredEntry

_TOKEN_SPLIT_RE = re.compile(r"[\W_]+")


def tokenize(text: str) -> list[str]:
    """Lower-case ``text`` and split it on runs of non-alphanumeric characters (Unicode aware)."""
    return [t for t in _TOKEN_SPLIT_RE.split(text.lower()) if t]


@dataclass(slots=True)
class _FieldIndex:
    weight: float
    b: float
    term_counts: list[Counter[str]]
    lengths: list[int]
    doc_freq: Counter[str]
    avg_length: float


class BM25Ranker:
    """
    Score entries against a query with BM25 computed per field.

    Title and description are indexed independently, each with its own
    document frequencies, average length and length normalization ``b``,
    and the weighted field scores are summed. IDF uses
    ``ln(1 + (N - df + 0.5) / (df + 0.5))`` so every matching term
    contributes a positive amount.

    Titles are not length normalized by default (``title_b=0``): a single
    title hit is worth exactly ``idf``, while a description hit is bounded
    by ``idf * (k1 + 1)``. With ``title_weight > description_weight * (k1 + 1)``
    a title-only match always outranks a description-only match of a term
    that is equally common in both fields, whatever the title length.
    """

    def __init__(
        self,
        *,
        k1: float = 1.2,
        b: float = 0.75,
        title_b: float = 0.0,
        title_weight: float = 3.0,
        description_weight: float = 1.0,
    ):
        self.k1 = k1
        self.b = b
        self.title_b = title_b
        self.title_weight = title_weight
        self.description_weight = description_weight

    def score(self, query: str, entries: Sequence[CatalogEntry]) -> list[ScoredEntry]:
        """Return one ``ScoredEntry`` per entry, in catalog order."""
        terms = list(dict.fromkeys(tokenize(query)))
        if not entries:
            return []
        if not terms:
            return [ScoredEntry(entry=e, score=0.0) for e in entries]

        fields = (
            self._index([e.title for e in entries], self.title_weight, self.title_b),
            self._index([e.description for e in entries], self.description_weight, self.b),
        )
        n_docs = len(entries)

        scored: list[ScoredEntry] = []
        for i, entry in enumerate(entries):
            total = 0.0
            for field in fields:
                total += field.weight * self._field_score(field, i, terms, n_docs)
            scored.append(ScoredEntry(entry=entry, score=total))
        return scored

    def rank(
        self,
        query: str,
        entries: Sequence[CatalogEntry],
        limit: int | None = None,
    ) -> list[ScoredEntry]:
        """
        Return matching entries by descending score.

        Entries without any query term are dropped. Ties keep catalog order.
        """
        matches = [s for s in self.score(query, entries) if s.score > 0]
        # sorted() is stable, so equal scores stay in catalog order
        ranked = sorted(matches, key=lambda s: -s.score)
        return ranked if limit is None else ranked[:limit]

    @staticmethod
    def _index(texts: list[str], weight: float, b: float) -> _FieldIndex:
        term_counts = [Counter(tokenize(t)) for t in texts]
        lengths = [sum(c.values()) for c in term_counts]
        doc_freq: Counter[str] = Counter()
        for counts in term_counts:
            doc_freq.update(counts.keys())
        avg_length = sum(lengths) / len(lengths) if lengths else 0.0
        return _FieldIndex(
            weight=weight,
            b=b,
            term_counts=term_counts,
            lengths=lengths,
            doc_freq=doc_freq,
            avg_length=avg_length,
        )

    def _field_score(self, field: _FieldIndex, i: int, terms: list[str], n_docs: int) -> float:
        counts = field.term_counts[i]
        if not counts or field.avg_length == 0:
            return 0.0

        norm = 1 - field.b + field.b * field.lengths[i] / field.avg_length
        score = 0.0
        for term in terms:
            tf = counts.get(term, 0)
            if not tf:
                continue
            df = field.doc_freq[term]
            idf = math.log(1 + (n_docs - df + 0.5) / (df + 0.5))
            score += idf * tf * (self.k1 + 1) / (tf + self.k1 * norm)
        return score
