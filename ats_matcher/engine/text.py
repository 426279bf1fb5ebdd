from __future__ import annotations

import re

STOPWORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "if", "then", "else", "when", "at", "by", "for",
        "with", "about", "against", "between", "into", "through", "during", "before", "after",
        "above", "below", "to", "from", "up", "down", "in", "out", "on", "off", "over", "under",
        "again", "further", "than", "once", "here", "there", "all", "any", "both", "each", "few",
        "more", "most", "other", "some", "such", "no", "nor", "not", "only", "own", "same", "so",
        "too", "very", "can", "will", "just", "don", "should", "now", "is", "are", "was", "were",
        "be", "been", "being", "of", "that", "this", "it", "as", "your", "you", "we", "our", "i",
        "me", "my", "they", "their", "them", "he", "she", "his", "her", "its",
    }
)

_WHITESPACE_PATTERN = re.compile(r"\s+")
_NON_TOKEN_PATTERN = re.compile(r"[^a-z0-9\- ]")
_DIGITS_PATTERN = re.compile(r"^[0-9]+$")


def normalize_text(text: str | None) -> str:
    return _WHITESPACE_PATTERN.sub(" ", text or "").strip().lower()


def tokenize(normalized: str) -> list[str]:
    """Split normalized text into keyword tokens.

    Characters outside ``[a-z0-9- ]`` become separators. Hyphens survive only
    inside a token ("full-stack"), so stray dashes between dates never become
    tokens. Stopwords and all-digit tokens are dropped; order and repeats are
    kept because term frequencies are counted from this sequence.
    """
    cleaned = _NON_TOKEN_PATTERN.sub(" ", normalized or "")
    tokens: list[str] = []
    for fragment in cleaned.split():
        token = fragment.strip("-")
        if not token:
            continue
        if token in STOPWORDS or _DIGITS_PATTERN.match(token):
            continue
        tokens.append(token)
    return tokens


def extract_bigrams(tokens: list[str]) -> list[str]:
    return [f"{tokens[index]} {tokens[index + 1]}" for index in range(len(tokens) - 1)]
