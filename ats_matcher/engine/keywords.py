from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence


@dataclass(frozen=True)
class KeywordScore:
    term: str
    score: float


@dataclass(frozen=True)
class CoverageResult:
    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    coverage: float = 0.0


def rank_keywords(
    vocabulary: Sequence[str],
    jd_frequencies: Mapping[str, int],
    idf: Mapping[str, float],
    top_k: int,
) -> list[KeywordScore]:
    """Return the job description's top-K terms by tf * idf, highest first.

    The sort is stable, so equal scores keep vocabulary order.
    """
    if top_k <= 0:
        raise ValueError("top_k must be greater than 0")

    scored: list[KeywordScore] = []
    for term in vocabulary:
        score = jd_frequencies.get(term, 0) * idf.get(term, 0.0)
        if score > 0:
            scored.append(KeywordScore(term=term, score=score))

    scored.sort(key=lambda item: item.score, reverse=True)
    return scored[:top_k]


def check_coverage(top_keywords: Sequence[str], resume_terms: Iterable[str]) -> CoverageResult:
    lookup = set(resume_terms)
    matched: dict[str, None] = {}
    missing: list[str] = []
    for keyword in top_keywords:
        if keyword in lookup:
            matched.setdefault(keyword, None)
        else:
            missing.append(keyword)

    if not top_keywords:
        return CoverageResult(matched=[], missing=[], coverage=0.0)

    return CoverageResult(
        matched=list(matched),
        missing=missing,
        coverage=len(matched) / len(top_keywords),
    )
