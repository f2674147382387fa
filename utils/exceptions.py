"""
Exception types for request validation and provider failures.
"""


class ChatValidationError(ValueError):
    """Inbound request is missing a required field or has the wrong shape."""


class ProviderTransportError(Exception):
    """A provider call failed: bad status, network fault, timeout or unexpected body."""

    def __init__(self, provider: str, reason: str):
        super().__init__(f"{provider}: {reason}")
        self.provider = provider
        self.reason = reason
