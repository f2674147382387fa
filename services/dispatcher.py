"""
Service dispatcher for remote completion providers.
Attempts providers one at a time in priority order and stops at the first usable reply.
"""
import asyncio
from typing import Callable, Iterable, Optional

import httpx

from models.chat_models import CompletionResult, DispatchOutcome, ProviderDescriptor
from utils.exceptions import ProviderTransportError
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


class ServiceDispatcher:
    """
    Sequential fallback across an immutable, ordered provider list.

    Providers are never raced: the first non-empty reply short-circuits the
    remaining ones so no further provider is paid for. Every attempt yields a
    CompletionResult; failures never propagate out of dispatch().
    """

    def __init__(
        self,
        providers: Iterable[ProviderDescriptor],
        client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
    ):
        self.providers: tuple[ProviderDescriptor, ...] = tuple(providers)
        self._client_factory = client_factory

    def _client(self) -> httpx.AsyncClient:
        if self._client_factory is not None:
            return self._client_factory()
        return HTTPClientManager.get_provider_client()

    @property
    def configured_providers(self) -> tuple[ProviderDescriptor, ...]:
        """Providers with a credential, in priority order."""
        return tuple(provider for provider in self.providers if provider.is_configured)

    async def dispatch(self, turns: list[dict]) -> DispatchOutcome:
        """
        Try each configured provider in order until one returns non-empty text.

        Args:
            turns: Outbound role/content turns, system turn first

        Returns:
            DispatchOutcome with the winning reply, or no reply when all failed
        """
        outcome = DispatchOutcome()

        for provider in self.providers:
            if not provider.is_configured:
                app_logger.debug(f"Skipping {provider.name}: no credential configured")
                continue

            app_logger.info(f"Attempting provider {provider.name} (timeout {provider.timeout}s)")
            result = await self.attempt(provider, turns)
            outcome.attempts.append(result)

            if result.ok:
                app_logger.info(f"Provider {provider.name} answered with {len(result.text)} characters")
                outcome.reply = result
                return outcome

            app_logger.warning(f"Provider {provider.name} failed: {result.reason}")

        if not outcome.attempts:
            app_logger.info("No remote providers configured")
        else:
            app_logger.warning(f"All providers failed: {', '.join(outcome.attempted_providers)}")

        return outcome

    async def attempt(self, provider: ProviderDescriptor, turns: list[dict]) -> CompletionResult:
        """Run one provider call inside its own timeout scope and type the outcome."""
        try:
            text = await asyncio.wait_for(self._call(provider, turns), timeout=provider.timeout)
        except asyncio.TimeoutError:
            return CompletionResult.failure(provider.name, f"timed out after {provider.timeout}s")
        except ProviderTransportError as e:
            return CompletionResult.failure(provider.name, e.reason)
        except httpx.HTTPError as e:
            return CompletionResult.failure(provider.name, f"network error: {type(e).__name__}: {e}")
        except Exception as e:
            app_logger.exception(f"Unexpected error from provider {provider.name}")
            return CompletionResult.failure(provider.name, f"unexpected error: {type(e).__name__}")

        if not text.strip():
            return CompletionResult.failure(provider.name, "empty reply")

        return CompletionResult.success(provider.name, text)

    async def _call(self, provider: ProviderDescriptor, turns: list[dict]) -> str:
        """
        POST the provider-specific body and extract the reply text.

        Raises:
            ProviderTransportError: Non-2xx status, unreadable body or missing reply field
            httpx.HTTPError: Network-level fault
        """
        client = self._client()
        body = provider.adapter.build_request(provider, turns)

        response = await client.post(
            provider.url,
            headers=provider.headers,
            json=body,
            timeout=provider.timeout
        )

        if not 200 <= response.status_code < 300:
            raise ProviderTransportError(provider.name, f"HTTP {response.status_code}: {response.text[:200]}")

        if not response.content:
            raise ProviderTransportError(provider.name, "empty response body")

        try:
            data = response.json()
        except ValueError:
            raise ProviderTransportError(provider.name, "response body is not valid JSON")

        text = provider.adapter.parse_response(data)
        if text is None:
            raise ProviderTransportError(provider.name, f"no reply field in {provider.adapter.family} response")

        return text
