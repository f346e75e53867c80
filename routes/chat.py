"""
Route handlers for the chat relay.
Handles the /openai-chat endpoint (and its /chat alias).
"""
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from models.api_models import ErrorResponse
from services.chat_service import ChatService
from utils.logger import app_logger

router = APIRouter()


def send_error(e: Exception) -> JSONResponse:
    """Turn an unexpected failure into a 500 with the exception message."""
    # Timeouts and some transport errors carry an empty message
    message = str(e) or type(e).__name__
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=message).model_dump()
    )


@router.post("/openai-chat")
@router.post("/chat")
async def chat(request: Request):
    """
    Relay a chat request to the completion API and return the generated text.
    """
    try:
        payload = await request.json()
        chat_request = ChatService.parse_request(payload)

        result = await ChatService.relay(chat_request)
        return JSONResponse(status_code=result.status_code, content=result.body)

    except Exception as e:
        app_logger.error(f"Chat relay error ({type(e).__name__}): {str(e)}")
        return send_error(e)
