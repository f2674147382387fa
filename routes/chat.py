"""
Route handlers for chat operations.
Handles the /chat endpoint.
"""
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from services.chat_service import ChatService
from services.dispatcher import ServiceDispatcher
from services.providers import build_default_providers
from utils.constants import CORS_HEADERS
from utils.exceptions import ChatValidationError
from utils.logger import app_logger

router = APIRouter()

_dispatcher: ServiceDispatcher | None = None


def get_dispatcher() -> ServiceDispatcher:
    """Process-wide dispatcher over the configured providers, built on first use."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = ServiceDispatcher(build_default_providers())
        names = [provider.name for provider in _dispatcher.configured_providers]
        app_logger.info(f"Dispatcher ready with providers: {names or 'none'}")
    return _dispatcher


def send_envelope(status_code: int, content: dict) -> JSONResponse:
    """JSON envelope carrying the cross-origin headers."""
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


@router.post("/chat")
async def chat(request: Request, dispatcher: ServiceDispatcher = Depends(get_dispatcher)):
    """
    Chat endpoint with conversation history and provider fallback.
    """
    try:
        payload = await request.json()
        chat_request = ChatService.parse_request(payload)
    except ChatValidationError as e:
        app_logger.warning(f"Rejected chat request: {e}")
        return send_envelope(status.HTTP_400_BAD_REQUEST, {"error": str(e)})
    except Exception as e:
        app_logger.error(f"Unreadable chat request: {type(e).__name__}: {e}")
        return send_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, ChatService.degraded_reply())

    try:
        reply = await ChatService.respond(chat_request, dispatcher)
        app_logger.info(f"Replying via {reply['service']}")
        return send_envelope(status.HTTP_200_OK, reply)
    except Exception as e:
        app_logger.exception(f"Chat error: {e}")
        return send_envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, ChatService.degraded_reply())
