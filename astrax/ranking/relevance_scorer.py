"""
Heuristic relevance scorer: how well a candidate's skills cover a posting.

Two phases:
  1. Required-skill overlap (only when the posting lists required skills).
  2. Title keywords (words longer than 3 characters). They become the
     requirement set when no skills are listed; otherwise any keyword hit
     adds a flat 0.5 bonus to the matched count without touching the total.

Matching is containment in either direction, case-insensitive, so "react"
covers "React Native" and "java" covers "javascript".
"""

import math
from collections.abc import Sequence
from typing import Any, List, Optional

from astrax.exceptions import InvalidArgumentError
from astrax.schemas.internship import Internship
from astrax.schemas.match import MatchResult
from astrax.schemas.profile import UserProfile

TITLE_KEYWORD_MIN_LENGTH = 3  # keywords must be strictly longer
TITLE_MATCH_BONUS = 0.5
MAX_SCORE = 100


def normalize_skills(skills: Sequence) -> List[str]:
    """Lowercase and trim; blank entries are dropped."""
    out = []
    for s in skills:
        token = s.strip().lower()
        if token:
            out.append(token)
    return out


def title_keywords(title: str) -> List[str]:
    """Whitespace-split lowercase title words longer than TITLE_KEYWORD_MIN_LENGTH."""
    return [w for w in title.lower().split() if len(w) > TITLE_KEYWORD_MIN_LENGTH]


def _contains_either(a: str, b: str) -> bool:
    return a in b or b in a


def is_covered(requirement: str, candidate: List[str]) -> bool:
    """True if any normalized candidate skill contains, or is contained in, requirement."""
    return any(_contains_either(c, requirement) for c in candidate)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_breakdown(
    candidate_skills: Sequence,
    posting_title: str,
    posting_required_skills: Sequence,
) -> MatchResult:
    """Score with the matched/total counts behind it. Inputs must already be validated."""
    candidate = normalize_skills(candidate_skills)
    if not candidate:
        return MatchResult(score=0, matched=0.0, total=0)

    # Blank requirements still count toward the total; any skill contains "".
    required = [s.strip().lower() for s in posting_required_skills]
    keywords = title_keywords(posting_title)
    matched = 0.0
    total = 0

    if required:
        total += len(required)
        matched += sum(1 for r in required if is_covered(r, candidate))
        if any(is_covered(k, candidate) for k in keywords):
            matched += TITLE_MATCH_BONUS
    else:
        total += len(keywords)
        matched += sum(1 for k in keywords if is_covered(k, candidate))

    if total == 0:
        return MatchResult(score=0, matched=matched, total=0)
    pct = min(float(MAX_SCORE), (matched / total) * 100)
    return MatchResult(score=_round_half_up(pct), matched=matched, total=total)


def score(
    candidate_skills: Sequence,
    posting_title: str,
    posting_required_skills: Sequence,
) -> int:
    """Bounded 0-100 match percentage. Pure; callers validate input first."""
    return score_breakdown(candidate_skills, posting_title, posting_required_skills).score


def validate_skill_list(value: Any, name: str) -> List[str]:
    """Return value as a list of strings or raise InvalidArgumentError."""
    if value is None:
        raise InvalidArgumentError(f"{name} is required; pass an empty list when there are none")
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidArgumentError(f"{name} must be a sequence of strings, got {type(value).__name__}")
    bad = [v for v in value if not isinstance(v, str)]
    if bad:
        raise InvalidArgumentError(f"{name} must contain only strings, got {type(bad[0]).__name__}")
    return list(value)


def validate_text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    return value


def match_posting(profile: Optional[UserProfile], posting: Optional[Internship]) -> MatchResult:
    """Validate the profile and posting, then score them."""
    if profile is None:
        raise InvalidArgumentError("profile is required")
    if posting is None:
        raise InvalidArgumentError("posting is required")
    skills = validate_skill_list(profile.skills, "profile.skills")
    title = validate_text(posting.title, "posting.title")
    required = validate_skill_list(posting.required_skills, "posting.required_skills")
    return score_breakdown(skills, title, required)
