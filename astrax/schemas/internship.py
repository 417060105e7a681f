"""Internship posting schema (seed data, recruiter listings, ranked feed)."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

InternshipType = Literal["Remote", "On-site", "Hybrid"]
ListingStatus = Literal["Active", "Closed", "Draft"]


class Internship(BaseModel):
    """A posting shown in the student feed and managed from the recruiter portal."""

    id: str = Field(..., description="Stable listing id")
    title: str = Field(..., description="Posting title")
    company: str = Field(..., description="Company name; recruiters see listings matching their company")
    location: str = Field(default="", description="Free-text location")
    type: InternshipType = Field(default="Remote", description="Remote, On-site or Hybrid")
    stipend: str = Field(default="", description="Display stipend, e.g. '₹15,000/mo'")
    description: str = Field(default="", description="Posting description")
    required_skills: List[str] = Field(default_factory=list, description="Required skills; may be empty")
    match_score: Optional[int] = Field(default=None, ge=0, le=100, description="Score against the current profile")
    match_reason: Optional[str] = Field(default=None, description="Short explanation of the score")
    posted_date: str = Field(default="", description="YYYY-MM-DD")
    logo_url: Optional[str] = Field(default=None, description="Company logo URL")
    applicants: Optional[int] = Field(default=None, ge=0, description="Applicant count for recruiter views")
    status: ListingStatus = Field(default="Active", description="Active, Closed or Draft")
