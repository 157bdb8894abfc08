"""Unit tests for HTTP routes."""

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from app.adapters.inbound.http.routes import register_exception_handlers, router
from app.adapters.outbound.email import InMemoryEmailSender
from app.adapters.outbound.lead import InMemoryLeadRepository
from app.application.errors import UpstreamServiceFailure
from app.application.use_cases.chat_use_case import ChatUseCase
from app.application.use_cases.studio_messages import StudioMessages
from app.application.use_cases.submit_lead_use_case import SubmitLeadUseCase
from app.infrastructure.config.resolver import chat_config_resolver, lead_config_resolver
from app.infrastructure.config.settings import Settings
from app.infrastructure.wiring.container import get_chat_use_case, get_submit_lead_use_case
from tests.unit.fakes import (
    CHAT_CONFIG,
    LEAD_CONFIG,
    VALID_LEAD,
    FailingLeadRepository,
    FakeLLMClient,
    FlakyEmailSender,
)

ENV_NAMES = [
    "GEMINI_API_KEY",
    "API_KEY",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "RESEND_API_KEY",
    "LEAD_REPOSITORY",
    "EMAIL_SENDER",
]


@pytest.fixture
def llm_client():
    return FakeLLMClient(reply="We craft brand identities.")


@pytest.fixture
def lead_repository():
    return InMemoryLeadRepository()


@pytest.fixture
def email_sender():
    return InMemoryEmailSender()


@pytest.fixture
def app(llm_client, lead_repository, email_sender):
    """Create FastAPI app with router and in-memory adapters."""
    app = FastAPI()
    app.include_router(router)
    register_exception_handlers(app)
    app.dependency_overrides[get_chat_use_case] = lambda: ChatUseCase(
        lambda: CHAT_CONFIG, lambda config: llm_client
    )
    app.dependency_overrides[get_submit_lead_use_case] = lambda: SubmitLeadUseCase(
        lambda: LEAD_CONFIG, lambda config: lead_repository, lambda config: email_sender
    )
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def bare_environment(monkeypatch):
    """Remove every configuration variable from the environment."""
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}


def test_chat_success(client):
    """Test chat endpoint with valid request."""
    response = client.post("/api/chat", json={"message": "What do you do?"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"reply": "We craft brand identities."}


def test_chat_whitespace_message_returns_400(client, llm_client):
    """Test that a whitespace-only message is rejected without calling the model."""
    response = client.post("/api/chat", json={"message": "   \n "})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "error": "Failed to generate response",
        "details": "Message is required",
    }
    assert llm_client.calls == []


def test_chat_invalid_json_returns_400(client, llm_client):
    """Test that malformed JSON is a 400, not FastAPI's 422."""
    response = client.post(
        "/api/chat", content="{message:", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"] == "Invalid JSON payload"
    assert llm_client.calls == []


def test_chat_empty_completion_returns_fallback(client, llm_client):
    """Test that an empty completion is a 200 with the fallback reply."""
    llm_client.reply = ""

    response = client.post("/api/chat", json={"message": "Hello"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"reply": StudioMessages.FALLBACK_REPLY}


def test_chat_upstream_failure_returns_502(client, llm_client):
    """Test that model failures map to 502 with a generic detail."""
    llm_client.error = UpstreamServiceFailure("Failed to generate response")

    response = client.post("/api/chat", json={"message": "Hello"})

    assert response.status_code == status.HTTP_502_BAD_GATEWAY
    assert response.json() == {
        "error": "Failed to generate response",
        "details": "Failed to generate response",
    }


def test_chat_unexpected_error_returns_500_without_leaking(client, llm_client):
    """Test that unknown exceptions are not echoed back."""
    llm_client.error = RuntimeError("secret internal state")

    response = client.post("/api/chat", json={"message": "Hello"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["details"] == "Unknown error"


def test_chat_missing_api_key_returns_500(app, bare_environment):
    """Test real configuration resolution with GEMINI_API_KEY unset."""
    app.dependency_overrides[get_chat_use_case] = lambda: ChatUseCase(
        chat_config_resolver(lambda: Settings(_env_file=None)),
        lambda config: FakeLLMClient(),
    )

    response = TestClient(app).post("/api/chat", json={"message": "Hello"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {
        "error": "Failed to generate response",
        "details": "GEMINI_API_KEY is missing from the server environment.",
    }


def test_submit_form_success(client, lead_repository, email_sender):
    """Test a full submission."""
    response = client.post("/api/submit-form", json=VALID_LEAD)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Form submitted successfully"
    assert data["leadId"] == lead_repository.records[0].id
    assert len(email_sender.outbox) == 2


@pytest.mark.parametrize("field", ["name", "email", "phone", "businessName", "message"])
def test_submit_form_blank_field_returns_400(client, lead_repository, email_sender, field):
    """Test that any blank field fails with 400 and touches nothing."""
    response = client.post("/api/submit-form", json=dict(VALID_LEAD, **{field: " "}))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "error": "Failed to process form submission",
        "details": "Missing required fields",
    }
    assert lead_repository.records == []
    assert email_sender.outbox == []


def test_submit_form_invalid_json_returns_400(client, lead_repository):
    """Test that a malformed body is rejected."""
    response = client.post("/api/submit-form", content=b"not json")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["details"] == "Invalid JSON payload"
    assert lead_repository.records == []


def test_submit_form_persistence_failure_returns_500(app, email_sender):
    """Test that a failed insert returns 500 and sends nothing."""
    app.dependency_overrides[get_submit_lead_use_case] = lambda: SubmitLeadUseCase(
        lambda: LEAD_CONFIG, lambda config: FailingLeadRepository(), lambda config: email_sender
    )

    response = TestClient(app).post("/api/submit-form", json=VALID_LEAD)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["details"] == "Failed to save lead to database"
    assert email_sender.outbox == []


def test_submit_form_admin_email_failure_returns_502(app, lead_repository):
    """Test that an admin send failure is a 502 and the acknowledgment is skipped."""
    sender = FlakyEmailSender(fail_on=(1,))
    app.dependency_overrides[get_submit_lead_use_case] = lambda: SubmitLeadUseCase(
        lambda: LEAD_CONFIG, lambda config: lead_repository, lambda config: sender
    )

    response = TestClient(app).post("/api/submit-form", json=VALID_LEAD)

    assert response.status_code == status.HTTP_502_BAD_GATEWAY
    assert response.json()["details"] == "Failed to send admin notification email"
    assert sender.attempts == 1
    assert len(lead_repository.records) == 1


def test_submit_form_missing_configuration_returns_500(app, bare_environment, lead_repository):
    """Test real configuration resolution with the Supabase URL unset."""
    app.dependency_overrides[get_submit_lead_use_case] = lambda: SubmitLeadUseCase(
        lead_config_resolver(lambda: Settings(_env_file=None)),
        lambda config: lead_repository,
        lambda config: InMemoryEmailSender(),
    )

    response = TestClient(app).post("/api/submit-form", json=VALID_LEAD)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["details"] == "SUPABASE_URL is missing from the server environment."
    assert lead_repository.records == []


def test_submit_form_duplicate_submissions_are_not_deduplicated(
    client, lead_repository, email_sender
):
    """Test that posting the same payload twice stores two leads and sends four emails."""
    first = client.post("/api/submit-form", json=VALID_LEAD).json()["leadId"]
    second = client.post("/api/submit-form", json=VALID_LEAD).json()["leadId"]

    assert first != second
    assert len(lead_repository.records) == 2
    assert len(email_sender.outbox) == 4


@pytest.mark.parametrize("path", ["/api/chat", "/api/submit-form"])
@pytest.mark.parametrize(
    "method", ["GET", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "PROPFIND"]
)
def test_non_post_methods_return_405(client, path, method, llm_client, lead_repository):
    """Test that every other method gets a machine-readable 405 regardless of body."""
    response = client.request(method, path, json={"message": "Hello"})

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert response.json() == {"error": "Method not allowed"}
    assert response.headers["allow"] == "POST"
    assert llm_client.calls == []
    assert lead_repository.records == []


@pytest.mark.parametrize("path", ["/api/chat", "/api/submit-form"])
def test_head_returns_405_with_allow_header(client, path):
    """Test HEAD, whose response carries no body."""
    response = client.head(path)

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert response.headers["allow"] == "POST"


def test_other_http_errors_keep_default_handling(client):
    """Test that unknown paths still get FastAPI's 404 body."""
    response = client.get("/api/unknown")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"detail": "Not Found"}
