"""
Cross-origin middleware: answers pre-flight probes and tags every response.
"""
from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from utils.constants import CORS_HEADERS
from utils.logger import app_logger


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Permissive CORS for the browser client.

    Unlike Starlette's CORSMiddleware, headers are attached even when the
    request carries no Origin, and pre-flight answers have an empty body.
    """

    PREFLIGHT_METHOD = "OPTIONS"

    async def dispatch(self, request: Request, call_next):
        """
        Process each request and attach cross-origin headers.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Empty pre-flight response, or the handler's response with CORS headers
        """
        if request.method == self.PREFLIGHT_METHOD:
            app_logger.debug(f"Pre-flight probe for {request.url.path}")
            return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)

        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response
