"""Utility exports."""

from .helpers import (
    extract_emails,
    extract_phones,
    new_id,
    parse_llm_json,
    today_iso,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "extract_emails",
    "extract_phones",
    "parse_llm_json",
    "new_id",
    "today_iso",
]
