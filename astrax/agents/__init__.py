"""Agents: LLM ranking, career roadmap and résumé polishing, chat."""

from .career_agent import generate_ats_resume, generate_career_path
from .chat_agent import get_chat_response
from .match_agent import heuristic_ranking, match_internships

__all__ = [
    "match_internships",
    "heuristic_ranking",
    "generate_career_path",
    "generate_ats_resume",
    "get_chat_response",
]
