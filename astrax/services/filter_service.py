"""Filter internship feeds and recruiter listings. No UI logic; used by ranking and app layers."""

import re
from typing import List, Optional

from astrax.schemas.internship import Internship

ALL = "All"


def parse_stipend(stipend: Optional[str]) -> int:
    """
    Parse a display stipend by keeping digits only: '₹15,000/mo' -> 15000.
    Strings without digits parse to 0.
    """
    digits = re.sub(r"[^0-9]", "", stipend or "")
    return int(digits) if digits else 0


def filter_by_search(jobs: List[Internship], query: str) -> List[Internship]:
    """
    Case-insensitive substring match on title or company. Does not mutate the input list.
    Empty query returns all jobs.
    """
    q = (query or "").lower()
    if not q:
        return list(jobs)
    return [j for j in jobs if q in j.title.lower() or q in j.company.lower()]


def filter_by_type(jobs: List[Internship], type_filter: str) -> List[Internship]:
    """Exact type match (Remote, On-site, Hybrid). 'All' returns all jobs."""
    if not type_filter or type_filter == ALL:
        return list(jobs)
    return [j for j in jobs if j.type == type_filter]


def filter_by_location(jobs: List[Internship], location: str) -> List[Internship]:
    """
    Substring match on location (case-sensitive, as entered).
    'All' or empty returns all jobs.
    """
    if not location or location == ALL:
        return list(jobs)
    return [j for j in jobs if location in j.location]


def filter_by_min_stipend(jobs: List[Internship], min_stipend: int) -> List[Internship]:
    """Keep jobs whose parsed stipend is at least min_stipend."""
    if not min_stipend or min_stipend <= 0:
        return list(jobs)
    return [j for j in jobs if parse_stipend(j.stipend) >= min_stipend]


def filter_by_status(jobs: List[Internship], status_filter: str) -> List[Internship]:
    """Recruiter listing filter: 'All', 'Active' or 'Closed'."""
    if not status_filter or status_filter == ALL:
        return list(jobs)
    return [j for j in jobs if j.status == status_filter]
