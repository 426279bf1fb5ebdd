from __future__ import annotations

import logging
from typing import Protocol

from ats_matcher.core.config.scoring import get_scoring_value
from ats_matcher.schemas.analysis import AnalysisDetails, AnalysisOptions, AnalysisResult

from .keywords import check_coverage, rank_keywords
from .suggestions import build_suggestions
from .text import extract_bigrams, normalize_text, tokenize
from .tfidf import (
    build_term_frequencies,
    build_tfidf_vector,
    build_vocabulary,
    compute_idf,
    cosine_similarity,
    round_half_up,
)

logger = logging.getLogger(__name__)


class ScoringStrategy(Protocol):
    def analyze(
        self,
        resume_text: str,
        job_description_text: str,
        options: AnalysisOptions,
    ) -> AnalysisResult:
        """Score a resume against a job description."""


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


class TfidfCoverageStrategy(ScoringStrategy):
    """TF-IDF cosine similarity blended with top-keyword coverage.

    Every table, vocabulary and vector lives only for the duration of one
    ``analyze`` call, so a single instance can be shared between threads.
    """

    def analyze(
        self,
        resume_text: str,
        job_description_text: str,
        options: AnalysisOptions,
    ) -> AnalysisResult:
        resume_tokens = tokenize(normalize_text(resume_text))
        jd_tokens = tokenize(normalize_text(job_description_text))
        resume_bigrams = extract_bigrams(resume_tokens)
        jd_bigrams = extract_bigrams(jd_tokens)

        jd_tf = build_term_frequencies(jd_tokens, jd_bigrams, options.phrase_boost_weight)
        resume_tf = build_term_frequencies(
            resume_tokens,
            resume_bigrams,
            options.effective_resume_bigram_boost,
        )

        vocabulary = build_vocabulary(jd_tf, resume_tf)
        idf = compute_idf([jd_tf, resume_tf])
        jd_vector = build_tfidf_vector(jd_tf, vocabulary, idf)
        resume_vector = build_tfidf_vector(resume_tf, vocabulary, idf)
        similarity = cosine_similarity(jd_vector, resume_vector)

        logger.debug(
            "ats_engine resume_tokens=%d jd_tokens=%d vocabulary=%d",
            len(resume_tokens),
            len(jd_tokens),
            len(vocabulary),
        )

        ranked = rank_keywords(vocabulary, jd_tf, idf, options.top_k_keywords)
        top_keywords = [item.term for item in ranked]
        coverage = check_coverage(top_keywords, [*resume_tokens, *resume_bigrams])

        blended = (options.similarity_weight * similarity) + (options.coverage_weight * coverage.coverage)
        score = round_half_up(_clamp01(blended) * 100)

        precision = int(get_scoring_value("report.metric_precision", 4))
        max_reported = int(get_scoring_value("report.max_top_keywords", 50))

        return AnalysisResult(
            score=score,
            matched_keywords=coverage.matched,
            missing_keywords=coverage.missing,
            suggestions=build_suggestions(coverage.missing, resume_text, len(resume_tokens)),
            details=AnalysisDetails(
                cosine_similarity=round(similarity, precision),
                keyword_coverage=round(coverage.coverage, precision),
                jd_top_keywords=top_keywords[:max_reported],
            ),
        )


DEFAULT_STRATEGY: ScoringStrategy = TfidfCoverageStrategy()


def analyze_match(
    resume_text: str,
    job_description_text: str,
    options: AnalysisOptions | None = None,
    strategy: ScoringStrategy | None = None,
) -> AnalysisResult:
    scorer = strategy or DEFAULT_STRATEGY
    return scorer.analyze(resume_text or "", job_description_text or "", options or AnalysisOptions())
