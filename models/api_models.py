"""
Pydantic data models for API requests and responses.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Message(BaseModel):
    """Chat message model."""
    role: Literal["system", "user", "assistant"]
    content: str

    def as_turn(self) -> dict:
        """Plain role/content dict as sent to providers."""
        return {"role": self.role, "content": self.content}


class ChatRequest(BaseModel):
    """Chat request model with conversation history."""
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., min_length=1)
    history: List[Message] = Field(default_factory=list)
    system_prompt: Optional[str] = Field(None, alias="systemPrompt")

    @field_validator("history", mode="before")
    @classmethod
    def _null_history_is_empty(cls, value):
        return [] if value is None else value


class ChatReply(BaseModel):
    """Reply envelope returned on success and on degraded server errors."""
    response: str
    service: str
