"""
Pydantic data models for API requests and responses.
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """
    Chat request model with optional conversation history.
    Values are passed through to the completion API untouched; only a missing
    history is filled in.
    """
    model_config = ConfigDict(populate_by_name=True)

    system_prompt: Any = Field(default=None, alias="systemPrompt")
    user_message: Any = Field(default=None, alias="userMessage")
    # Expected in {"role": ..., "content": ...} shape, not checked here
    history: Any = Field(default_factory=list)


class ChatResponse(BaseModel):
    """Successful relay response."""
    content: Optional[str]


class ErrorResponse(BaseModel):
    """Failed relay response."""
    error: str
