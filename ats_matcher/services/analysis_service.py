from __future__ import annotations

import logging

from ats_matcher.engine import analyze_match
from ats_matcher.schemas.analysis import AnalysisOptions, AnalysisResult, AnalyzeRequest

logger = logging.getLogger(__name__)


class MissingFieldError(ValueError):
    def __init__(self, message: str, *, field: str, status_code: int = 422):
        super().__init__(message)
        self.field = field
        self.status_code = status_code


class AnalysisFailedError(RuntimeError):
    def __init__(self, message: str = "Analysis failed.", *, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


def validate_inputs(resume_text: str | None, job_description_text: str | None) -> None:
    if not (job_description_text or "").strip():
        raise MissingFieldError("Job description is required.", field="jobDescriptionText")
    if not (resume_text or "").strip():
        raise MissingFieldError("Resume is required.", field="resumeText")


def analyze_texts(
    resume_text: str,
    job_description_text: str,
    options: AnalysisOptions | None = None,
) -> AnalysisResult:
    """Validate both documents, then run the scoring engine once.

    Missing input surfaces as ``MissingFieldError``. Anything the engine raises
    is logged and re-raised as ``AnalysisFailedError``; no partial result is
    ever returned.
    """
    validate_inputs(resume_text, job_description_text)

    try:
        result = analyze_match(resume_text, job_description_text, options)
    except Exception as exc:
        logger.exception("ats_analysis_failed")
        raise AnalysisFailedError() from exc

    logger.info(
        "ats_analysis score=%d similarity=%.4f coverage=%.4f matched=%d missing=%d",
        result.score,
        result.details.cosine_similarity,
        result.details.keyword_coverage,
        len(result.matched_keywords),
        len(result.missing_keywords),
    )
    return result


def run_analysis(payload: AnalyzeRequest) -> AnalysisResult:
    return analyze_texts(payload.resume_text, payload.job_description_text, payload.options)
