"""Chat message schema for the career assistant widget."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    role: Literal["user", "model"] = Field(..., description="user or model")
    text: str = Field(default="", description="Message text")
    timestamp: datetime = Field(default_factory=datetime.now)
