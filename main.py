"""
Impulse Buddy - FastAPI application for an impulse-spending chat companion.
Forwards chat turns to remote LLM providers with ordered fallback and a local responder.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from config import Config
from routes import chat
from middleware import CORSHeadersMiddleware
from services.chat_service import ChatService
from utils.constants import CORS_HEADERS, ErrorMessage
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    chat.get_dispatcher()
    yield
    await HTTPClientManager.close_all()

app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan)

app.add_middleware(CORSHeadersMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Reshape framework HTTP errors into the {error} envelope"""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = ErrorMessage.METHOD_NOT_ALLOWED
    else:
        message = str(exc.detail)

    app_logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers={**(exc.headers or {}), **CORS_HEADERS},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler: never leak a stack trace to the client"""
    app_logger.error(f"Unhandled error for {request.url}: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ChatService.degraded_reply(),
        headers=CORS_HEADERS,
    )


#root endpoint
@app.get("/")
async def root():
    """Root endpoint - health check."""
    providers = [provider.name for provider in chat.get_dispatcher().configured_providers]
    return {"message": "Impulse Buddy server is running", "providers": providers}

app.include_router(chat.router, tags=["chat"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
