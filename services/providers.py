"""
Request-shape adapters for remote completion providers.
Each adapter builds a provider-specific request body from the outbound turns
and extracts the reply text from the provider's response body.
"""
from typing import Optional

from config import Config
from models.chat_models import ProviderDescriptor


class ProviderAdapter:
    """Base adapter for one provider family."""

    family: str = "base"

    def build_request(self, provider: ProviderDescriptor, turns: list[dict]) -> dict:
        """Return the provider-specific JSON body for these turns; subclasses must override."""
        raise NotImplementedError

    def parse_response(self, data) -> Optional[str]:
        """Return the reply text, or None when the expected field is missing."""
        raise NotImplementedError


class ChatCompletionsAdapter(ProviderAdapter):
    """OpenAI-style chat completions: role/content array in, choices out."""

    family = "chat-completions"

    def build_request(self, provider: ProviderDescriptor, turns: list[dict]) -> dict:
        return {
            "model": provider.model,
            "messages": turns,
            "max_tokens": provider.max_tokens,
            "temperature": provider.temperature,
            "stream": False,
        }

    def parse_response(self, data) -> Optional[str]:
        if not isinstance(data, dict):
            return None

        choices = data.get("choices")
        if not choices or not isinstance(choices, list):
            return None

        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        if not isinstance(message, dict):
            return None

        content = message.get("content")
        return content if isinstance(content, str) else None


class TextGenerationAdapter(ProviderAdapter):
    """
    Text-generation inference: one flat prompt string in, generated_text out.

    Structured turns are flattened by joining the content of the last few turns,
    which approximates conversational context for models without a chat format.
    """

    family = "text-generation"

    def __init__(self, context_turns: int = Config.TEXT_PROMPT_TURNS):
        self.context_turns = context_turns

    def build_prompt(self, turns: list[dict]) -> str:
        recent = turns[-self.context_turns:] if self.context_turns > 0 else turns[-1:]
        return "\n\n".join(turn["content"] for turn in recent if turn.get("content"))

    def build_request(self, provider: ProviderDescriptor, turns: list[dict]) -> dict:
        return {
            "inputs": self.build_prompt(turns),
            "parameters": {
                "max_new_tokens": provider.max_tokens,
                "temperature": provider.temperature,
                "return_full_text": False,
            },
        }

    def parse_response(self, data) -> Optional[str]:
        # Inference endpoints answer either [{"generated_text": ...}] or {"generated_text": ...}
        if isinstance(data, list):
            if len(data) != 1:
                return None
            data = data[0]

        if not isinstance(data, dict):
            return None

        text = data.get("generated_text")
        return text if isinstance(text, str) else None


def build_default_providers() -> tuple[ProviderDescriptor, ...]:
    """
    Build the ordered provider list from Config.
    Groq answers fastest, so it goes first; Hugging Face is the slower backup.
    """
    return (
        ProviderDescriptor(
            name="Groq",
            url=Config.GROQ_URL,
            api_key=Config.GROQ_API_KEY,
            model=Config.GROQ_MODEL,
            timeout=Config.GROQ_TIMEOUT,
            adapter=ChatCompletionsAdapter(),
            max_tokens=Config.MAX_TOKENS,
            temperature=Config.TEMPERATURE,
        ),
        ProviderDescriptor(
            name="HuggingFace",
            url=Config.huggingface_endpoint(),
            api_key=Config.HUGGINGFACE_API_KEY,
            model=Config.HUGGINGFACE_MODEL,
            timeout=Config.HUGGINGFACE_TIMEOUT,
            adapter=TextGenerationAdapter(),
            max_tokens=Config.MAX_TOKENS,
            temperature=Config.TEMPERATURE,
        ),
    )
