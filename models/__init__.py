"""
Models package exports.
"""
from models.api_models import Message, ChatRequest, ChatReply
from models.chat_models import ProviderDescriptor, CompletionResult, DispatchOutcome

__all__ = [
    'Message',
    'ChatRequest',
    'ChatReply',
    'ProviderDescriptor',
    'CompletionResult',
    'DispatchOutcome'
]
