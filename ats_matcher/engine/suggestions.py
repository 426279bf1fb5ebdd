from __future__ import annotations

import re
from typing import Sequence

from ats_matcher.core.config.scoring import get_scoring_value

EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
PHONE_RE = re.compile(r"(\+[0-9]{1,3}[\s-]?)?\(?[0-9]{3}\)?[\s-]?[0-9]{3}[\s-]?[0-9]{4}")

NO_GAPS_MESSAGE = "Great, most high-value JD keywords are present in the resume."
EMAIL_MESSAGE = "Add a professional email address in the resume header."
PHONE_MESSAGE = "Add a phone number in the resume header."
LAYOUT_MESSAGE = "Use a clean single-column layout and consistent date formatting (MM/YYYY)."


def has_email(text: str) -> bool:
    return bool(EMAIL_RE.search(text or ""))


def has_phone(text: str) -> bool:
    return bool(PHONE_RE.search(text or ""))


def build_suggestions(
    missing_keywords: Sequence[str],
    resume_text: str,
    resume_token_count: int,
) -> list[str]:
    max_listed = int(get_scoring_value("suggestions.max_listed_missing", 8))
    priority = int(get_scoring_value("suggestions.priority_missing", 3))
    short_tokens = int(get_scoring_value("suggestions.short_resume_tokens", 120))
    long_tokens = int(get_scoring_value("suggestions.long_resume_tokens", 1200))

    suggestions: list[str] = []
    if missing_keywords:
        listed = ", ".join(missing_keywords[:max_listed])
        suggestions.append(
            f"Consider adding or rephrasing bullets to include: {listed}. "
            f"Prioritize the first {priority} missing keywords in role summary or top 1-2 bullets."
        )
    else:
        suggestions.append(NO_GAPS_MESSAGE)

    if not has_email(resume_text):
        suggestions.append(EMAIL_MESSAGE)
    if not has_phone(resume_text):
        suggestions.append(PHONE_MESSAGE)

    if resume_token_count < short_tokens:
        suggestions.append(
            f"Resume is short (<{short_tokens} tokens). "
            "Consider 1 page with more quantified achievements."
        )
    elif resume_token_count > long_tokens:
        suggestions.append(f"Resume is long (>{long_tokens} tokens). Trim older or low-value roles.")

    suggestions.append(LAYOUT_MESSAGE)
    return suggestions
