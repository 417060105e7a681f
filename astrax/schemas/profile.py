"""User profile schema shared by students and recruiters."""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

Role = Literal["student", "recruiter"]


class UserProfile(BaseModel):
    """Signed-in user. Students carry the skill set the feed is scored against."""

    name: str = Field(default="", description="Full name")
    email: str = Field(default="", description="Email; doubles as the student id on applications")
    role: Role = Field(default="student", description="student or recruiter")
    university: str = Field(default="", description="University name")
    phone: str = Field(default="", description="Phone number")
    skills: List[str] = Field(default_factory=list, description="Declared or extracted skills")
    missing_skills: List[str] = Field(default_factory=list, description="Suggested skills to learn")
    summary: str = Field(default="", description="Professional summary")
    experience_level: str = Field(default="", description="e.g. Student, Entry Level")
    resume_text: Optional[str] = Field(default=None, description="Extracted résumé text")
    # Recruiter specific
    company_name: Optional[str] = Field(default=None, description="Recruiter's company")
    company_website: Optional[str] = Field(default=None, description="Company website")
    company_description: Optional[str] = Field(default=None, description="Company description")
