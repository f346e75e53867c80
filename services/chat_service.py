"""
Chat service containing the relay logic.
Builds the completion request, calls the upstream API and shapes its reply.
"""
from typing import Any

from config import Config
from models.api_models import ChatRequest, ChatResponse, ErrorResponse
from models.chat_models import UpstreamRequest, RelayResult
from utils.http_client import HTTPClientManager
from utils.logger import app_logger, preview

API_KEY_MISSING_ERROR = "API key not configured on server"
UPSTREAM_FALLBACK_ERROR = "OpenAI API request failed"


class ChatService:
    """Service for relaying chat requests to the completion API."""

    @staticmethod
    def parse_request(payload: Any) -> ChatRequest:
        """Turn a decoded JSON body into a ChatRequest. A missing history becomes []; a non-object body raises."""
        return ChatRequest.model_validate(payload)

    @staticmethod
    def build_messages(request: ChatRequest) -> list:
        """Assemble [system] + history + [user] in conversation order."""
        return [
            {"role": "system", "content": request.system_prompt},
            *request.history,
            {"role": "user", "content": request.user_message},
        ]

    @staticmethod
    def build_upstream_request(request: ChatRequest) -> UpstreamRequest:
        return UpstreamRequest(messages=ChatService.build_messages(request))

    @staticmethod
    def extract_error_message(data: Any) -> str:
        """Pull the provider's error text out of a failure body, or fall back to a generic message."""
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str) and error:
                return error
        return UPSTREAM_FALLBACK_ERROR

    @staticmethod
    def extract_content(data: dict) -> str | None:
        """Return the first choice's message content. Raises on an unexpected shape."""
        return data["choices"][0]["message"]["content"]

    @staticmethod
    async def relay(request: ChatRequest) -> RelayResult:
        """
        Forward a chat request to the completion API.

        Transport errors and malformed upstream bodies are not handled here;
        they propagate to the caller.

        Returns:
            RelayResult with the status code and JSON body for the caller
        """
        app_logger.info(f"Generating response for message: {preview(request.user_message)}")

        api_key = Config.get_openai_api_key()
        if not api_key:
            app_logger.error("OPENAI_API_KEY is not set, refusing chat request")
            return RelayResult(
                status_code=500,
                body=ErrorResponse(error=API_KEY_MISSING_ERROR).model_dump()
            )

        upstream_request = ChatService.build_upstream_request(request)
        client = HTTPClientManager.get_upstream_client()
        response = await client.post(
            Config.OPENAI_API_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json=upstream_request.to_payload(),
        )

        # Error bodies are JSON too and carry the provider's message
        data = response.json()

        if not response.is_success:
            app_logger.error(f"OpenAI API error: {response.status_code} {data}")
            return RelayResult(
                status_code=response.status_code,
                body=ErrorResponse(error=ChatService.extract_error_message(data)).model_dump()
            )

        content = ChatService.extract_content(data)
        app_logger.info(f"Completion received: {len(content or '')} characters")
        return RelayResult(status_code=200, body=ChatResponse(content=content).model_dump())
