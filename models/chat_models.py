"""
Data models for chat processing.
Contains provider descriptors and the typed outcome of provider attempts.
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from services.providers import ProviderAdapter


@dataclass(frozen=True)
class ProviderDescriptor:
    """
    Static description of one remote completion provider.
    Position in the dispatcher's provider tuple is its fallback priority.
    """
    name: str
    url: str
    api_key: str
    model: str
    timeout: float
    adapter: "ProviderAdapter"
    max_tokens: int = 80
    temperature: float = 0.9

    @property
    def is_configured(self) -> bool:
        """A provider without a credential is never attempted."""
        return bool(self.api_key)

    @property
    def headers(self) -> dict:
        """Request headers, including the bearer credential."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def __repr__(self) -> str:
        return f"ProviderDescriptor(name={self.name!r}, model={self.model!r}, timeout={self.timeout})"


@dataclass(frozen=True)
class CompletionResult:
    """Outcome of a single provider attempt: reply text or a failure reason."""
    provider: str
    text: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return bool(self.text and self.text.strip())

    @classmethod
    def success(cls, provider: str, text: str) -> "CompletionResult":
        return cls(provider=provider, text=text.strip())

    @classmethod
    def failure(cls, provider: str, reason: str) -> "CompletionResult":
        return cls(provider=provider, reason=reason)


@dataclass
class DispatchOutcome:
    """Result of one dispatch: the winning reply (if any) and every attempt made."""
    reply: Optional[CompletionResult] = None
    attempts: list[CompletionResult] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.reply is not None and self.reply.ok

    @property
    def attempted_providers(self) -> list[str]:
        return [attempt.provider for attempt in self.attempts]
