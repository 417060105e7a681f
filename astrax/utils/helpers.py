"""Helper utilities for the AstraX application."""

import json
import re
import uuid
from datetime import date
from typing import Any, List, Optional

_EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
_PHONE_PATTERN = r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"


def extract_emails(text: str) -> List[str]:
    """Extract email addresses from text using regex."""
    if not text:
        return []
    return list(dict.fromkeys(re.findall(_EMAIL_PATTERN, text)))


def extract_phones(text: str) -> List[str]:
    """Extract phone-number-looking runs (10 digits with optional country code)."""
    if not text:
        return []
    return list(dict.fromkeys(m.strip() for m in re.findall(_PHONE_PATTERN, text)))


def parse_llm_json(text: str) -> Optional[Any]:
    """
    Parse JSON from an LLM response.
    Strips markdown code fences, then tries the whole text, then the outermost
    {...} or [...] span. Returns None if nothing parses.
    """
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    if not raw:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        pass
    for open_ch, close_ch in (("{", "}"), ("[", "]")):
        start, end = raw.find(open_ch), raw.rfind(close_ch)
        if start != -1 and end > start:
            try:
                return json.loads(raw[start : end + 1])
            except json.JSONDecodeError:
                continue
    return None


def new_id(length: int = 9) -> str:
    """Short random id for listings and applications."""
    return uuid.uuid4().hex[:length]


def today_iso() -> str:
    """Today's date as YYYY-MM-DD."""
    return date.today().isoformat()
