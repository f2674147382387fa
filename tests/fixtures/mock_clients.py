import asyncio
import json as jsonlib
from unittest.mock import AsyncMock

import httpx


class ProviderClientBuilder:
    """Factory for an httpx.AsyncClient mock with per-URL behaviour."""

    def __init__(self):
        self.behaviours = {}
        self.calls = []

    def respond(self, url, payload=None, status_code=200, content=None):
        """Answer POSTs to url with a JSON payload, or raw content bytes."""
        if content is None:
            content = jsonlib.dumps(payload).encode() if payload is not None else b""
        self.behaviours[url] = ("respond", status_code, content)
        return self

    def raise_error(self, url, exc):
        """Raise exc when url is called."""
        self.behaviours[url] = ("raise", exc)
        return self

    def hang(self, url, seconds=5.0):
        """Stall longer than any test timeout."""
        self.behaviours[url] = ("hang", seconds)
        return self

    @property
    def called_urls(self):
        return [call["url"] for call in self.calls]

    async def _post(self, url, headers=None, json=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        behaviour = self.behaviours.get(url, ("respond", 404, b""))
        kind = behaviour[0]

        if kind == "raise":
            raise behaviour[1]

        if kind == "hang":
            await asyncio.sleep(behaviour[1])
            return httpx.Response(200, content=b"{}", request=httpx.Request("POST", url))

        _, status_code, content = behaviour
        return httpx.Response(
            status_code,
            content=content,
            headers={"Content-Type": "application/json"},
            request=httpx.Request("POST", url),
        )

    def build(self):
        """Build the AsyncMock."""
        client = AsyncMock(spec=httpx.AsyncClient)
        client.post = AsyncMock(side_effect=self._post)
        return client
