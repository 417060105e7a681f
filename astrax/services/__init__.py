"""Service exports."""

from .filter_service import (
    filter_by_location,
    filter_by_min_stipend,
    filter_by_search,
    filter_by_status,
    filter_by_type,
    parse_stipend,
)
from .llm_client import LLMClient, get_llm_client, request_json, run_sync
from .auth_service import AuthProvider, OfflineAuthProvider
from .session_service import SessionService, next_view
from .application_service import ApplicationService
from .recruiter_service import ListingForm, RecruiterService

__all__ = [
    "filter_by_search",
    "filter_by_type",
    "filter_by_location",
    "filter_by_min_stipend",
    "filter_by_status",
    "parse_stipend",
    "LLMClient",
    "get_llm_client",
    "request_json",
    "run_sync",
    "AuthProvider",
    "OfflineAuthProvider",
    "SessionService",
    "next_view",
    "ApplicationService",
    "ListingForm",
    "RecruiterService",
]
