"""Score, filter and sort the internship feed against the current profile; skill gap detection."""

from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from astrax.ranking.relevance_scorer import (
    is_covered,
    normalize_skills,
    score,
    validate_skill_list,
)
from astrax.schemas.internship import Internship
from astrax.services.filter_service import (
    ALL,
    filter_by_location,
    filter_by_min_stipend,
    filter_by_search,
    filter_by_type,
)
from astrax.utils.logger import get_logger

logger = get_logger(__name__)


class FeedFilters(BaseModel):
    """Student feed filters as chosen in the dashboard."""

    search: str = Field(default="", description="Substring of title or company")
    type: str = Field(default=ALL, description="All, Remote, On-site or Hybrid")
    location: str = Field(default=ALL, description="Location substring or All")
    min_stipend: int = Field(default=0, ge=0, description="Minimum parsed stipend")


def score_feed(candidate_skills: Sequence[str], postings: List[Internship]) -> List[Internship]:
    """
    Return copies of postings with match_score set from the heuristic scorer.
    Recomputed on every call; nothing is cached.
    """
    skills = validate_skill_list(candidate_skills, "candidate_skills")
    scored = []
    for p in postings:
        s = score(skills, p.title, validate_skill_list(p.required_skills, f"posting {p.id} required_skills"))
        scored.append(p.model_copy(update={"match_score": s}))
    return scored


def apply_filters(postings: List[Internship], filters: FeedFilters) -> List[Internship]:
    jobs = filter_by_search(postings, filters.search)
    jobs = filter_by_type(jobs, filters.type)
    jobs = filter_by_location(jobs, filters.location)
    return filter_by_min_stipend(jobs, filters.min_stipend)


def sort_by_score(postings: List[Internship]) -> List[Internship]:
    """Stable sort, highest score first; equal scores keep feed order. Unscored sorts as 0."""
    return sorted(postings, key=lambda p: -(p.match_score or 0))


def rank_feed(
    candidate_skills: Sequence[str],
    postings: List[Internship],
    filters: Optional[FeedFilters] = None,
) -> List[Internship]:
    """Score against the profile, filter, then sort by score descending."""
    scored = score_feed(candidate_skills, postings)
    filtered = apply_filters(scored, filters or FeedFilters())
    ranked = sort_by_score(filtered)
    logger.debug("rank_feed: postings=%s filtered=%s", len(postings), len(ranked))
    return ranked


def compute_skill_gaps(postings: List[Internship], candidate_skills: Sequence[str]) -> List[str]:
    """
    Required skills across postings that no candidate skill covers (containment
    either way). First-seen spelling, deduplicated case-insensitively.
    """
    candidate = normalize_skills(validate_skill_list(candidate_skills, "candidate_skills"))
    seen = set()
    missing: List[str] = []
    for p in postings:
        for raw in p.required_skills:
            key = raw.strip().lower()
            if not key or key in seen:
                continue
            seen.add(key)
            if not is_covered(key, candidate):
                missing.append(raw.strip())
    return missing
