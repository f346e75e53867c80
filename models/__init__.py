"""
Models package exports.
"""
from models.api_models import ChatRequest, ChatResponse, ErrorResponse
from models.chat_models import UpstreamRequest, RelayResult

__all__ = [
    'ChatRequest',
    'ChatResponse',
    'ErrorResponse',
    'UpstreamRequest',
    'RelayResult'
]
