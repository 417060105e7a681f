"""LLM-based extraction of a student profile from résumé text."""

from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from astrax.config import RESUME_TEXT_LIMIT
from astrax.cv_pipeline.text_extractor import extract_text_from_file
from astrax.schemas.llm_result import LLMSuccess
from astrax.schemas.profile import UserProfile
from astrax.services.llm_client import LLMClient, get_llm_client, request_json, run_sync
from astrax.utils.helpers import extract_emails, extract_phones
from astrax.utils.logger import get_logger

logger = get_logger(__name__)

RESUME_SYSTEM_PROMPT = "You are a data extraction API. Return ONLY raw JSON. No markdown. No explanations."

RESUME_USER_PROMPT = """EXTRACT DATA FROM RESUME BELOW.

RETURN JSON OBJECT WITH THESE EXACT KEYS:
{{
  "name": "Full Name",
  "email": "email@example.com",
  "phone": "Phone Number",
  "university": "University Name",
  "skills": ["Skill1", "Skill2"],
  "missingSkills": ["Skill3"],
  "summary": "Short professional summary",
  "experienceLevel": "Student"
}}
missingSkills: up to 3 skills this candidate should learn for an entry-level tech role.
If a field cannot be determined, use an empty string or empty array.

RESUME TEXT:
{resume_text}
"""

FALLBACK_SUMMARY = "Could not analyze resume. Please fill details manually."


class ResumeExtraction(BaseModel):
    """Shape the LLM is asked to return; tolerant of nulls and stray types."""

    name: str = ""
    email: str = ""
    phone: str = ""
    university: str = ""
    skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list, alias="missingSkills")
    summary: str = ""
    experience_level: str = Field(default="", alias="experienceLevel")

    @field_validator("name", "email", "phone", "university", "summary", "experience_level", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else str(value)

    @field_validator("skills", "missing_skills", mode="before")
    @classmethod
    def _ensure_str_list(cls, value):
        if not isinstance(value, list):
            return []
        return [str(v).strip() for v in value if v is not None and str(v).strip()]


def fallback_profile(resume_text: str) -> UserProfile:
    """Profile used when the LLM cannot be reached or returns unusable data."""
    emails = extract_emails(resume_text)
    return UserProfile(
        name="Candidate",
        email=emails[0] if emails else "",
        role="student",
        skills=[],
        missing_skills=[],
        summary=FALLBACK_SUMMARY,
        experience_level="Entry Level",
        resume_text=resume_text,
    )


async def analyze_resume(resume_text: str, client: LLMClient) -> UserProfile:
    """
    Extract a student profile from résumé text. Email and phone found by regex
    in the text take precedence over the LLM's values. Never raises for LLM
    failures; returns fallback_profile instead.
    """
    result = await request_json(
        client,
        RESUME_SYSTEM_PROMPT,
        RESUME_USER_PROMPT.format(resume_text=resume_text[:RESUME_TEXT_LIMIT]),
    )
    if not isinstance(result, LLMSuccess) or not isinstance(result.data, dict):
        logger.warning("Résumé analysis failed (%s); returning fallback profile", result.status)
        return fallback_profile(resume_text)
    try:
        extracted = ResumeExtraction.model_validate(result.data)
    except ValidationError as e:
        logger.warning("Résumé extraction validation failed: %s", e)
        return fallback_profile(resume_text)

    emails = extract_emails(resume_text)
    phones = extract_phones(resume_text)
    return UserProfile(
        name=extracted.name,
        email=emails[0] if emails else extracted.email,
        phone=phones[0] if phones else extracted.phone,
        role="student",
        university=extracted.university,
        skills=extracted.skills,
        missing_skills=extracted.missing_skills,
        summary=extracted.summary,
        experience_level=extracted.experience_level,
        resume_text=resume_text,
    )


def run_cv_pipeline(
    file_bytes: bytes,
    filename: str,
    client: Optional[LLMClient] = None,
) -> Optional[UserProfile]:
    """
    Run the full résumé pipeline: extract text from file, then LLM extraction.
    Returns None when no text can be read from the file. Safe to call from sync
    context (e.g. Streamlit).
    """
    raw_text = extract_text_from_file(file_bytes, filename)
    if not raw_text:
        return None
    return run_sync(analyze_resume(raw_text, client or get_llm_client()))
