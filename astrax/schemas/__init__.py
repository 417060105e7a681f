"""Schema exports."""

from .application import Application, ApplicationStatus
from .chat import ChatMessage
from .internship import Internship, InternshipType, ListingStatus
from .llm_result import LLMParseFailure, LLMRateLimited, LLMResult, LLMSuccess, LLMUnavailable
from .match import MatchResult, RankingEntry
from .profile import Role, UserProfile
from .resume_data import EducationItem, ExperienceItem, ProjectItem, ResumeData
from .roadmap import LearningRoadmap, ProjectIdea, RoadmapStep, SkillNote

__all__ = [
    "Application",
    "ApplicationStatus",
    "ChatMessage",
    "Internship",
    "InternshipType",
    "ListingStatus",
    "LLMResult",
    "LLMSuccess",
    "LLMParseFailure",
    "LLMRateLimited",
    "LLMUnavailable",
    "MatchResult",
    "RankingEntry",
    "Role",
    "UserProfile",
    "ResumeData",
    "EducationItem",
    "ExperienceItem",
    "ProjectItem",
    "LearningRoadmap",
    "SkillNote",
    "RoadmapStep",
    "ProjectIdea",
]
