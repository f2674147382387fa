import pytest

from tests.fixtures.responses import GROQ_TEST_URL, HF_TEST_URL


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def provider_client_builder():
    from tests.fixtures.mock_clients import ProviderClientBuilder
    return ProviderClientBuilder()


@pytest.fixture
def make_provider():
    """Build a ProviderDescriptor for tests, chat-completions shape by default."""
    from models.chat_models import ProviderDescriptor
    from services.providers import ChatCompletionsAdapter

    def _make(name, url=None, api_key="test-key", timeout=1.0, adapter=None):
        return ProviderDescriptor(
            name=name,
            url=url or f"https://{name.lower()}.test/v1/chat/completions",
            api_key=api_key,
            model=f"{name.lower()}-model",
            timeout=timeout,
            adapter=adapter or ChatCompletionsAdapter(),
        )

    return _make


@pytest.fixture
def default_providers(make_provider):
    """Groq-shaped then Hugging Face-shaped provider, both configured."""
    from services.providers import TextGenerationAdapter
    return (
        make_provider("Groq", url=GROQ_TEST_URL),
        make_provider("HuggingFace", url=HF_TEST_URL, adapter=TextGenerationAdapter()),
    )


@pytest.fixture
def dispatcher_factory(provider_client_builder):
    """Dispatcher over the given providers using the builder's mock client."""
    from services.dispatcher import ServiceDispatcher

    def _build(providers):
        client = provider_client_builder.build()
        return ServiceDispatcher(providers, client_factory=lambda: client)

    return _build


@pytest.fixture
def chat_request():
    """Standard ChatRequest for testing."""
    from models.api_models import ChatRequest
    return ChatRequest(
        message="thinking about buying new headphones",
        history=[],
    )


@pytest.fixture
def configured_app(monkeypatch):
    """
    The real application with the dispatcher dependency swappable per test.
    Yields (client, use_dispatcher) where use_dispatcher installs a dispatcher.
    """
    from fastapi.testclient import TestClient
    from main import app
    from routes import chat
    from services.dispatcher import ServiceDispatcher

    monkeypatch.setattr(chat, "_dispatcher", ServiceDispatcher(()))

    def use_dispatcher(dispatcher):
        app.dependency_overrides[chat.get_dispatcher] = lambda: dispatcher

    with TestClient(app) as client:
        yield client, use_dispatcher

    app.dependency_overrides.clear()
