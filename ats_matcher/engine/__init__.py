from .keywords import CoverageResult, KeywordScore, check_coverage, rank_keywords
from .strategy import ScoringStrategy, TfidfCoverageStrategy, analyze_match
from .suggestions import build_suggestions
from .text import STOPWORDS, extract_bigrams, normalize_text, tokenize
from .tfidf import (
    build_term_frequencies,
    build_tfidf_vector,
    build_vocabulary,
    compute_idf,
    cosine_similarity,
)

__all__ = [
    "STOPWORDS",
    "normalize_text",
    "tokenize",
    "extract_bigrams",
    "build_term_frequencies",
    "build_vocabulary",
    "compute_idf",
    "build_tfidf_vector",
    "cosine_similarity",
    "KeywordScore",
    "rank_keywords",
    "CoverageResult",
    "check_coverage",
    "build_suggestions",
    "ScoringStrategy",
    "TfidfCoverageStrategy",
    "analyze_match",
]
