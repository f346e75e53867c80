"""
CORS middleware for browser callers.
"""
from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware
from config import Config


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Answers preflight requests and stamps the fixed CORS header set on every response.
    """

    CORS_HEADERS: dict = Config.CORS_HEADERS

    async def dispatch(self, request: Request, call_next):
        """
        Short-circuit OPTIONS, otherwise pass the request on and add headers to the result.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Preflight response, or the handler's response with CORS headers
        """
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", headers=self.CORS_HEADERS)

        response = await call_next(request)
        for name, value in self.CORS_HEADERS.items():
            response.headers[name] = value
        return response
