from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_matcher.parsing import read_document  # noqa: E402
from ats_matcher.schemas.analysis import AnalysisOptions  # noqa: E402
from ats_matcher.services.analysis_service import analyze_texts  # noqa: E402
from ats_matcher.services.report_service import build_report, render_report_json  # noqa: E402


def _build_options(args: argparse.Namespace) -> AnalysisOptions:
    overrides = {
        "top_k_keywords": args.top_k,
        "phrase_boost_weight": args.phrase_boost,
        "resume_bigram_boost": args.resume_bigram_boost,
    }
    return AnalysisOptions(**{key: value for key, value in overrides.items() if value is not None})


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a resume against a job description.")
    parser.add_argument("resume", help="Resume file (.txt or .pdf)")
    parser.add_argument("job", help="Job description file (.txt or .pdf)")
    parser.add_argument("--top-k", type=int, default=None, help="Number of job keywords used for coverage")
    parser.add_argument("--phrase-boost", type=float, default=None, help="Bigram weight for the job description")
    parser.add_argument(
        "--resume-bigram-boost",
        type=float,
        default=None,
        help="Bigram weight for the resume (defaults to the phrase boost).",
    )
    parser.add_argument("--report", default=None, help="Write a JSON report with a timestamp to this path")
    args = parser.parse_args(argv)

    resume = read_document(args.resume)
    job = read_document(args.job)
    result = analyze_texts(resume.text, job.text, _build_options(args))

    if args.report:
        out_path = Path(args.report)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(render_report_json(build_report(result)) + "\n", encoding="utf-8")
        print(f"Score: {result.score}/100. Report written to {out_path}")
        return 0

    print(json.dumps(result.model_dump(by_alias=True), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
