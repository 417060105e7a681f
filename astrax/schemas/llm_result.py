"""Tagged results for LLM calls, validated at the client boundary."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class LLMSuccess(BaseModel):
    """Provider answered and the body parsed as JSON."""

    status: Literal["success"] = "success"
    data: Any = Field(..., description="Parsed JSON (object or array)")


class LLMParseFailure(BaseModel):
    """Provider answered but the body was not usable JSON."""

    status: Literal["parse_failure"] = "parse_failure"
    raw_text: str = Field(default="", description="Unparsed response body")
    error: str = Field(default="", description="What went wrong")


class LLMRateLimited(BaseModel):
    """Every attempt was rejected with a rate-limit class error."""

    status: Literal["rate_limited"] = "rate_limited"
    attempts: int = Field(..., ge=1)
    message: str = ""


class LLMUnavailable(BaseModel):
    """Non-retryable failure, or retries exhausted on transient errors."""

    status: Literal["unavailable"] = "unavailable"
    message: str = ""


LLMResult = Annotated[
    Union[LLMSuccess, LLMParseFailure, LLMRateLimited, LLMUnavailable],
    Field(discriminator="status"),
]
