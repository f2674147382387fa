from utils.constants import CORS_HEADERS, GUIDANCE_QUESTIONS


def assert_cors_headers(response):
    """Assert that every permissive cross-origin header is present."""
    for name, value in CORS_HEADERS.items():
        assert response.headers.get(name) == value, f"Missing or wrong '{name}' header: {dict(response.headers)}"


def assert_local_reply(payload, question_index=None):
    """Assert a reply envelope came from the local responder."""
    assert payload["service"] == "Local Buddy", f"Expected local responder, got {payload['service']}"
    assert payload["response"] in GUIDANCE_QUESTIONS, f"Unexpected local reply: {payload['response']!r}"
    if question_index is not None:
        assert payload["response"] == GUIDANCE_QUESTIONS[question_index]


def sent_messages(builder, call_index=0):
    """Outbound turns captured by a ProviderClientBuilder for one call."""
    return builder.calls[call_index]["json"]["messages"]
