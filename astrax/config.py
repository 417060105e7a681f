"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# LLM provider – never hardcode keys
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")
LLM_PROVIDER: str = os.getenv("LLM_PROVIDER", "openai")
# Keyless fallback endpoint (OpenAI-compatible message format)
POLLINATIONS_URL: str = os.getenv("POLLINATIONS_URL", "https://text.pollinations.ai/")
POLLINATIONS_MODEL: str = "openai"

# HTTP / retry settings
HTTP_TIMEOUT_SECONDS: float = 30.0
LLM_MAX_RETRIES: int = 3
LLM_BACKOFF_SECONDS: float = 1.0

# Local key-value persistence
STORAGE_PATH: Path = Path(os.getenv("ASTRAX_STORAGE_PATH", str(_base.parent / ".astrax_storage.json")))
STORAGE_KEYS: dict = {
    "current_user": "astrax_current_user",
    "saved_profile": "astrax_saved_profile",
    "saved_recruiter_profile": "astrax_saved_recruiter_profile",
    "applications": "astrax_applications",
    "internships": "astrax_internships",
}

# Listing vocabularies
INTERNSHIP_TYPES: list = ["Remote", "On-site", "Hybrid"]
TYPE_FILTER_OPTIONS: list = ["All"] + INTERNSHIP_TYPES
LISTING_STATUSES: list = ["Active", "Closed", "Draft"]
LISTING_STATUS_FILTERS: list = ["All", "Active", "Closed"]
APPLICATION_STATUSES: list = ["Pending", "Shortlisted", "Rejected", "Accepted"]

# Recruiter-posted listings have no location input yet
DEFAULT_LISTING_LOCATION: str = "Hyderabad"

# Résumé text sent to the LLM
RESUME_TEXT_LIMIT: int = 10000

# Logging
LOG_LEVEL: str = os.getenv("ASTRAX_LOG_LEVEL", "INFO").upper()
