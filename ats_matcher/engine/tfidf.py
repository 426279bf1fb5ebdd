from __future__ import annotations

import math
from collections import Counter
from typing import Mapping, Sequence


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_term_frequencies(
    tokens: Sequence[str],
    bigrams: Sequence[str],
    phrase_boost: float = 1.0,
) -> Counter[str]:
    """Count unigrams once each and bigrams with the rounded phrase boost.

    A bigram always adds at least 1 so that small boosts never erase a phrase.
    """
    frequencies: Counter[str] = Counter(tokens)
    bigram_increment = max(1, round_half_up(phrase_boost))
    for bigram in bigrams:
        frequencies[bigram] += bigram_increment
    return frequencies


def build_vocabulary(*tables: Mapping[str, int]) -> list[str]:
    # First table's terms first, in discovery order; both vectors share this order.
    seen: dict[str, None] = {}
    for table in tables:
        for term in table:
            seen.setdefault(term, None)
    return list(seen)


def compute_idf(tables: Sequence[Mapping[str, int]]) -> dict[str, float]:
    """Smoothed IDF: ln((N + 1) / (df + 1)) + 1 over the given documents."""
    doc_count = len(tables)
    document_frequency: Counter[str] = Counter()
    for table in tables:
        document_frequency.update(term for term, count in table.items() if count > 0)
    return {
        term: math.log((doc_count + 1) / (df + 1)) + 1.0
        for term, df in document_frequency.items()
    }


def build_tfidf_vector(
    frequencies: Mapping[str, int],
    vocabulary: Sequence[str],
    idf: Mapping[str, float],
) -> list[float]:
    return [frequencies.get(term, 0) * idf.get(term, 0.0) for term in vocabulary]


def cosine_similarity(left: Sequence[float], right: Sequence[float]) -> float:
    if len(left) != len(right):
        raise ValueError("cosine_similarity requires vectors of equal length")
    dot = sum(a * b for a, b in zip(left, right))
    left_norm = math.sqrt(sum(a * a for a in left))
    right_norm = math.sqrt(sum(b * b for b in right))
    if left_norm <= 0 or right_norm <= 0:
        return 0.0
    return min(1.0, max(0.0, dot / (left_norm * right_norm)))
