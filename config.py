"""
Configuration module for the Impulse Buddy application.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv
from utils.logger import app_logger

load_dotenv()


def _env_float(name: str, default: float) -> float:
    """Read a float from the environment, keeping the default on bad input."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        app_logger.warning(f"Ignoring invalid value for {name}: {raw!r}")
        return default


def _env_int(name: str, default: int) -> int:
    """Read an int from the environment, keeping the default on bad input."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        app_logger.warning(f"Ignoring invalid value for {name}: {raw!r}")
        return default


class Config:
    """Application configuration class."""

    # API Keys
    GROQ_API_KEY: str = os.getenv("GROQ_API_KEY", "")
    HUGGINGFACE_API_KEY: str = os.getenv("HUGGINGFACE_API_KEY", "")

    # API Configuration
    GROQ_URL: str = "https://api.groq.com/openai/v1/chat/completions"
    GROQ_MODEL: str = os.getenv("GROQ_MODEL", "llama3-8b-8192")
    HUGGINGFACE_URL: str = "https://api-inference.huggingface.co/models"
    HUGGINGFACE_MODEL: str = os.getenv("HUGGINGFACE_MODEL", "mistralai/Mistral-7B-Instruct-v0.2")

    # Application Settings
    APP_TITLE: str = "Impulse Buddy"
    MAX_HISTORY_MESSAGES: int = _env_int("MAX_HISTORY_MESSAGES", 6)
    TEXT_PROMPT_TURNS: int = 3

    # Generation parameters, short and lively replies
    MAX_TOKENS: int = 80
    TEMPERATURE: float = 0.9

    # Timeouts (in seconds), summed they stay under the client's patience
    GROQ_TIMEOUT: float = _env_float("GROQ_TIMEOUT", 5.0)
    HUGGINGFACE_TIMEOUT: float = _env_float("HUGGINGFACE_TIMEOUT", 8.0)

    # Connection pool
    MAX_CONNECTIONS: int = 10

    @classmethod
    def huggingface_endpoint(cls) -> str:
        """Full inference URL for the configured Hugging Face model."""
        return f"{cls.HUGGINGFACE_URL}/{cls.HUGGINGFACE_MODEL}"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and log warnings for missing API keys."""
        if not cls.GROQ_API_KEY:
            app_logger.warning("GROQ_API_KEY not found in environment, Groq provider disabled")

        if not cls.HUGGINGFACE_API_KEY:
            app_logger.warning("HUGGINGFACE_API_KEY not found in environment, Hugging Face provider disabled")

        if not cls.GROQ_API_KEY and not cls.HUGGINGFACE_API_KEY:
            app_logger.warning("No remote providers configured, every reply will come from the local responder")


Config.validate()
