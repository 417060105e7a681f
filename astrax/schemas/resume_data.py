"""Structured résumé used by the ATS résumé builder."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class EducationItem(BaseModel):
    id: str = ""
    institution: str = ""
    degree: str = ""
    year: str = ""
    gpa: str = ""


class ProjectItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = ""
    title: str = ""
    tech_stack: List[str] = Field(default_factory=list, alias="techStack")
    description: str = ""


class ExperienceItem(BaseModel):
    id: str = ""
    company: str = ""
    role: str = ""
    duration: str = ""
    description: str = ""


class ResumeData(BaseModel):
    """Résumé content; camelCase aliases match what the LLM is asked to return."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(default="", alias="fullName")
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""
    education: List[EducationItem] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    projects: List[ProjectItem] = Field(default_factory=list)
    experience: List[ExperienceItem] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    summary: str = ""
