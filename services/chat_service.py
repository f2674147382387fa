"""
Chat service containing core chat processing logic.
Handles request validation, outbound turn assembly and reply envelopes.
"""
from pydantic import ValidationError

from config import Config
from models.api_models import ChatReply, ChatRequest, Message
from services.dispatcher import ServiceDispatcher
from services.local_responder import LocalResponder
from utils.constants import DEFAULT_SYSTEM_PROMPT, DEGRADED_RESPONSE, ErrorMessage, ServiceLabel
from utils.exceptions import ChatValidationError
from utils.logger import app_logger


class ChatService:
    """Service for handling chat logic."""

    @staticmethod
    def parse_request(payload) -> ChatRequest:
        """
        Validate a decoded JSON body into a ChatRequest.

        Raises:
            ChatValidationError: Body is not an object, message is missing/empty, or history is malformed
        """
        if not isinstance(payload, dict):
            raise ChatValidationError(ErrorMessage.BODY_NOT_OBJECT)

        if not payload.get("message"):
            raise ChatValidationError(ErrorMessage.MESSAGE_REQUIRED)

        try:
            return ChatRequest.model_validate(payload)
        except ValidationError as e:
            first_error = e.errors()[0]
            field = ".".join(str(part) for part in first_error.get("loc", ())) or "body"
            raise ChatValidationError(f"{field}: {first_error.get('msg', 'invalid value')}") from e

    @staticmethod
    def get_system_prompt(request: ChatRequest) -> str:
        """Get system prompt from request or use default."""
        if request.system_prompt:
            return request.system_prompt
        return DEFAULT_SYSTEM_PROMPT

    @staticmethod
    def truncate_history(history: list[Message], limit: int = Config.MAX_HISTORY_MESSAGES) -> list[Message]:
        """Keep only the most recent `limit` turns, oldest first."""
        if limit <= 0:
            return []
        return list(history[-limit:])

    @staticmethod
    def prepare_messages(request: ChatRequest, system_prompt: str) -> list[dict]:
        """
        Prepare the outbound turn list: system turn, recent history, then the new user turn.
        """
        history = ChatService.truncate_history(request.history, Config.MAX_HISTORY_MESSAGES)
        return [
            {"role": "system", "content": system_prompt},
            *(turn.as_turn() for turn in history),
            {"role": "user", "content": request.message},
        ]

    @staticmethod
    async def respond(request: ChatRequest, dispatcher: ServiceDispatcher) -> dict:
        """
        Produce the success envelope for a validated request.

        Remote providers are tried first; when none answers, the local responder does.
        """
        system_prompt = ChatService.get_system_prompt(request)
        messages = ChatService.prepare_messages(request, system_prompt)

        outcome = await dispatcher.dispatch(messages)
        if outcome.succeeded:
            return ChatReply(response=outcome.reply.text, service=outcome.reply.provider).model_dump()

        app_logger.info("Using local responder")
        return ChatReply(
            response=LocalResponder.respond(request.message, request.history),
            service=ServiceLabel.LOCAL,
        ).model_dump()

    @staticmethod
    def degraded_reply() -> dict:
        """In-voice reply for unexpected server faults."""
        return ChatReply(response=DEGRADED_RESPONSE, service=ServiceLabel.OFFLINE).model_dump()
