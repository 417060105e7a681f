"""Career Agent: learning roadmap for a target role and ATS résumé polishing."""

import json
from typing import Optional

from pydantic import ValidationError

from astrax.schemas.llm_result import LLMSuccess
from astrax.schemas.profile import UserProfile
from astrax.schemas.resume_data import ResumeData
from astrax.schemas.roadmap import LearningRoadmap
from astrax.services.llm_client import LLMClient, request_json
from astrax.utils.logger import get_logger

logger = get_logger(__name__)

ROADMAP_SYSTEM_PROMPT = "Generate a detailed Career Roadmap JSON."

ROADMAP_USER_PROMPT = """Profile Skills: {skills}.
Experience: {experience}.
Target: {target_role} at {target_company}.

Format:
{{
    "readinessScore": 0,
    "strongSkills": [{{"skill": "", "reason": ""}}],
    "skillsToImprove": [{{"skill": "", "reason": ""}}],
    "skillsToLearn": [{{"skill": "", "reason": ""}}],
    "roadmap": [{{"month": "", "skills": [], "tools": [], "task": ""}}],
    "recommendedProjects": [{{"name": "", "skillsCovered": [], "reason": ""}}],
    "profileSuggestions": [],
    "nextImmediateStep": ""
}}"""

ATS_SYSTEM_PROMPT = (
    "You are an expert ATS Resume Writer. Polish the data into a JSON object with keys "
    "fullName, email, phone, linkedin, github, education, skills, projects, experience, "
    "certifications, summary."
)

ATS_USER_PROMPT = """Raw Data: {raw}

Tasks:
1. Write compelling summary.
2. Use STAR method for projects.
3. Quantify experience.
4. Keep every field present in the raw data."""


async def generate_career_path(
    profile: UserProfile,
    target_role: str,
    target_company: str,
    client: LLMClient,
) -> Optional[LearningRoadmap]:
    """Return a roadmap, or None when the LLM fails or returns an unusable shape."""
    user_prompt = ROADMAP_USER_PROMPT.format(
        skills=", ".join(profile.skills),
        experience=profile.experience_level,
        target_role=target_role,
        target_company=target_company,
    )
    result = await request_json(client, ROADMAP_SYSTEM_PROMPT, user_prompt)
    if not isinstance(result, LLMSuccess):
        logger.warning("Roadmap generation failed: %s", result.status)
        return None
    try:
        return LearningRoadmap.model_validate(result.data)
    except ValidationError as e:
        logger.warning("Roadmap validation failed: %s", e)
        return None


async def generate_ats_resume(resume_data: ResumeData, client: LLMClient) -> Optional[ResumeData]:
    """Return the polished résumé, or None on failure."""
    raw = json.dumps(resume_data.model_dump(by_alias=True), ensure_ascii=False)
    result = await request_json(client, ATS_SYSTEM_PROMPT, ATS_USER_PROMPT.format(raw=raw))
    if not isinstance(result, LLMSuccess):
        logger.warning("ATS résumé generation failed: %s", result.status)
        return None
    try:
        return ResumeData.model_validate(result.data)
    except ValidationError as e:
        logger.warning("ATS résumé validation failed: %s", e)
        return None
