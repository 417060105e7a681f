"""Application schema: one student applying to one internship."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

ApplicationStatus = Literal["Pending", "Shortlisted", "Rejected", "Accepted"]


class Application(BaseModel):
    """Submitted application as seen by both the student and the recruiter."""

    id: str = Field(..., description="Application id")
    job_id: str = Field(..., description="Internship id")
    student_id: str = Field(..., description="Student email")
    student_name: str = Field(default="", description="Student name at time of applying")
    student_email: str = Field(default="", description="Student email")
    job_title: str = Field(default="", description="Internship title at time of applying")
    company_name: str = Field(default="", description="Internship company")
    status: ApplicationStatus = Field(default="Pending", description="Recruiter review status")
    applied_date: str = Field(default="", description="YYYY-MM-DD")
    match_score: int = Field(default=0, ge=0, le=100, description="Match score when the student applied")
    resume_base64: Optional[str] = Field(default=None, description="Uploaded résumé, base64")
    resume_mime_type: Optional[str] = Field(default=None, description="MIME type of the uploaded résumé")
