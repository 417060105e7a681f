"""Career roadmap schema returned by the career agent."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SkillNote(BaseModel):
    skill: str = ""
    reason: str = ""


class RoadmapStep(BaseModel):
    month: str = ""
    skills: List[str] = Field(default_factory=list)
    tools: List[str] = Field(default_factory=list)
    task: str = ""


class ProjectIdea(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    skills_covered: List[str] = Field(default_factory=list, alias="skillsCovered")
    reason: str = ""


class LearningRoadmap(BaseModel):
    """Readiness assessment and month-by-month plan for a target role."""

    model_config = ConfigDict(populate_by_name=True)

    readiness_score: int = Field(default=0, alias="readinessScore", description="0-100 as judged by the model")
    strong_skills: List[SkillNote] = Field(default_factory=list, alias="strongSkills")
    skills_to_improve: List[SkillNote] = Field(default_factory=list, alias="skillsToImprove")
    skills_to_learn: List[SkillNote] = Field(default_factory=list, alias="skillsToLearn")
    roadmap: List[RoadmapStep] = Field(default_factory=list)
    recommended_projects: List[ProjectIdea] = Field(default_factory=list, alias="recommendedProjects")
    profile_suggestions: List[str] = Field(default_factory=list, alias="profileSuggestions")
    next_immediate_step: str = Field(default="", alias="nextImmediateStep")
