from __future__ import annotations

import json
from datetime import datetime, timezone

from ats_matcher.core.config.scoring import get_scoring_value
from ats_matcher.schemas.analysis import AnalysisReport, AnalysisResult


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def report_filename() -> str:
    return str(get_scoring_value("report.filename", "ats-real-report.json"))


def build_report(result: AnalysisResult, generated_at: datetime | None = None) -> AnalysisReport:
    return AnalysisReport(
        generated_at=generated_at or _utc_now(),
        score=result.score,
        matched_keywords=list(result.matched_keywords),
        missing_keywords=list(result.missing_keywords),
        suggestions=list(result.suggestions),
        details=result.details,
    )


def render_report_json(report: AnalysisReport) -> str:
    payload = report.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, ensure_ascii=False, indent=2)


def parse_report_json(raw: str) -> AnalysisReport:
    return AnalysisReport.model_validate(json.loads(raw))
