from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ats_matcher.core.config.scoring import get_scoring_value

ExtractSourceType = Literal["text", "pdf"]


def _engine_default(key: str, fallback: Any) -> Any:
    value = get_scoring_value(f"engine.{key}", fallback)
    return fallback if value is None else value


class AnalysisOptions(BaseModel):
    """Tuning knobs for one analysis call; defaults come from config/scoring.yaml."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    top_k_keywords: int = Field(
        default_factory=lambda: int(_engine_default("top_k_keywords", 40)),
        alias="topKKeywords",
        ge=1,
    )
    phrase_boost_weight: float = Field(
        default_factory=lambda: float(_engine_default("phrase_boost_weight", 1.6)),
        alias="phraseBoostWeight",
        gt=0.0,
    )
    resume_bigram_boost: float | None = Field(
        default_factory=lambda: get_scoring_value("engine.resume_bigram_boost", None),
        alias="resumeBigramBoost",
        gt=0.0,
    )
    coverage_weight: float = Field(
        default_factory=lambda: float(_engine_default("coverage_weight", 0.25)),
        alias="coverageWeight",
        ge=0.0,
        le=1.0,
    )
    similarity_weight: float = Field(
        default_factory=lambda: float(_engine_default("similarity_weight", 0.75)),
        alias="similarityWeight",
        ge=0.0,
        le=1.0,
    )

    @property
    def effective_resume_bigram_boost(self) -> float:
        if self.resume_bigram_boost is None:
            return self.phrase_boost_weight
        return self.resume_bigram_boost


class AnalysisDetails(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    cosine_similarity: float = Field(alias="cosineSimilarity", ge=0.0, le=1.0)
    keyword_coverage: float = Field(alias="keywordCoverage", ge=0.0, le=1.0)
    jd_top_keywords: list[str] = Field(default_factory=list, alias="jdTopKeywords")


class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    score: int = Field(ge=0, le=100)
    matched_keywords: list[str] = Field(default_factory=list, alias="matchedKeywords")
    missing_keywords: list[str] = Field(default_factory=list, alias="missingKeywords")
    suggestions: list[str] = Field(default_factory=list)
    details: AnalysisDetails


class AnalysisReport(AnalysisResult):
    generated_at: datetime = Field(alias="generatedAt")


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(default="", alias="resumeText")
    job_description_text: str = Field(default="", alias="jobDescriptionText")
    options: AnalysisOptions | None = None


class ExtractTextResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filename: str
    source_type: ExtractSourceType = Field(alias="sourceType")
    text: str
    characters: int = Field(ge=0)
    details: dict[str, Any] = Field(default_factory=dict)
