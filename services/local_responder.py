"""
Local responder used when no remote provider produced a reply.
Walks the user through the four guidance questions in a fixed order.
"""
from typing import Iterable, Union

from models.api_models import Message
from utils.constants import GUIDANCE_QUESTIONS


class LocalResponder:
    """Deterministic fixed-sequence responder, no I/O and no randomness."""

    QUESTIONS = GUIDANCE_QUESTIONS

    @staticmethod
    def _role(turn: Union[Message, dict]) -> str:
        return turn.role if isinstance(turn, Message) else turn.get("role", "")

    @classmethod
    def question_index(cls, history: Iterable[Union[Message, dict]]) -> int:
        """
        Index of the next question to ask.

        Every prior user turn moves one step forward: the first is the item the
        user brought up, each later one answers the question before it.
        """
        user_turns = sum(1 for turn in history if cls._role(turn) == "user")
        return min(user_turns, len(cls.QUESTIONS) - 1)

    @classmethod
    def respond(cls, message: str, history: Iterable[Union[Message, dict]] = ()) -> str:
        """
        Pick the next guidance question for this conversation.

        The current message does not change the outcome, open-ended talk is
        always steered back to the checklist.
        """
        return cls.QUESTIONS[cls.question_index(history)]
