import pytest
from fastapi.testclient import TestClient

from backend.config import Settings
from backend.main import create_app
from faq.matcher import FAQEntry

OPERATOR_TOKEN = "operator-secret"

DURATION_ENTRY = FAQEntry(
    question="What is the duration of the internship?",
    category="Internship",
    answer="The internship lasts 6 weeks.",
)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        operator_history_token=OPERATOR_TOKEN,
        faq_path=None,
        support_email="support@mrsac-isms.in",
        query_log_enabled=True,
    )


@pytest.fixture
def knowledge_base():
    return [DURATION_ENTRY]


@pytest.fixture
def app(settings, knowledge_base):
    return create_app(settings=settings, knowledge_base=knowledge_base)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def operator_headers():
    return {"X-Operator-Token": OPERATOR_TOKEN}
