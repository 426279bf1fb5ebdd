"""Deterministic resume to job description matching.

Usage:
    from ats_matcher.engine import analyze_match

    result = analyze_match(resume_text, job_description_text)
    print(result.score, result.missing_keywords)
"""

__version__ = "0.1.0"
