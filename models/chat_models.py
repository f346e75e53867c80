"""
Data models for chat relay processing.
Contains the outbound request and the result handed back to the route.
"""
from dataclasses import dataclass, field
from config import Config


@dataclass
class UpstreamRequest:
    """
    Request sent to the completion API.
    Generation parameters are fixed by Config, never taken from the caller.
    """
    messages: list
    model: str = Config.OPENAI_MODEL
    max_tokens: int = Config.MAX_TOKENS
    temperature: float = Config.TEMPERATURE

    def to_payload(self) -> dict:
        """Build the JSON body for the completion endpoint."""
        return {
            "model": self.model,
            "messages": self.messages,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


@dataclass
class RelayResult:
    """Status code and JSON body to return to the caller."""
    status_code: int
    body: dict = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
