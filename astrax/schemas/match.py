"""Relevance scorer output and LLM ranking entries."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MatchResult(BaseModel):
    """Heuristic match of one profile against one posting."""

    score: int = Field(..., ge=0, le=100, description="Bounded match percentage")
    matched: float = Field(default=0.0, ge=0, description="Matched requirement count, including title bonus")
    total: int = Field(default=0, ge=0, description="Requirement count (required skills or title keywords)")


class RankingEntry(BaseModel):
    """One entry of an LLM ranking response: {"id", "matchScore", "matchReason"}."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Internship id")
    match_score: int = Field(default=0, alias="matchScore", description="0-100")
    match_reason: Optional[str] = Field(default=None, alias="matchReason", description="Why it fits")

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        return str(value) if isinstance(value, (int, float)) else value

    @field_validator("match_score", mode="before")
    @classmethod
    def _clamp_score(cls, value: Any) -> Any:
        if value is None:
            return 0
        if isinstance(value, str):
            value = value.strip().rstrip("%")
        try:
            return max(0, min(100, int(round(float(value)))))
        except (TypeError, ValueError):
            return value
