"""
Pytest configuration and shared fixtures.

This module provides common fixtures for testing the PDF QA API.
All fixtures use mocks to avoid real calls to the inference provider.

Usage:
    def test_example(mock_llm, test_container):
        # mock_llm is already configured as AsyncMock
        # test_container has mocked dependencies
        pass
"""

import os

# Set dummy env vars to satisfy Settings validation before any app import
os.environ.setdefault("GROQ_API_KEY", "dummy_groq_key")
os.environ.setdefault("GROQ_MODEL", "test-model")

import pytest
from unittest.mock import AsyncMock, MagicMock


# =============================================================================
# LLM MOCK FIXTURES
# =============================================================================


@pytest.fixture
def mock_llm_response():
    """
    Factory fixture for creating mock LLM responses.

    Usage:
        def test_example(mock_llm_response):
            response = mock_llm_response("Test content")
            assert response.content == "Test content"
    """
    def _create_response(content: str = "Mocked LLM response"):
        response = MagicMock()
        response.content = content
        return response
    return _create_response


@pytest.fixture
def mock_llm(mock_llm_response):
    """
    AsyncMock that simulates LLM behavior.

    Override ``ainvoke.return_value`` or ``ainvoke.side_effect`` per test.
    """
    llm = AsyncMock()
    llm.ainvoke.return_value = mock_llm_response("Mocked LLM response")
    return llm


# =============================================================================
# DOCUMENT FIXTURES
# =============================================================================


@pytest.fixture
def resume_text():
    """Plain text as it would come out of a two page resume."""
    return (
        "Jane Doe\nSenior Backend Engineer\n\n"
        "Experience\n"
        "Acme Corp, Python developer, Jan 2018 - Dec 2021\n"
        "Globex, Tech lead, Jan 2022 - present\n\n"
        "Skills: Python, FastAPI, PostgreSQL"
    )


@pytest.fixture
def mock_extractor():
    """Text extractor double whose ``extract`` is an AsyncMock."""
    extractor = MagicMock()
    extractor.extract = AsyncMock(return_value="Extracted text")
    return extractor


# =============================================================================
# CONTAINER / APP FIXTURES
# =============================================================================


@pytest.fixture
def test_container(mock_llm, mock_extractor):
    """
    DependencyContainer with mocked LLM and extractor for isolated testing.
    """
    from pdf_qa.services.container import DependencyContainer

    container = DependencyContainer()
    container.override_llm(mock_llm)
    container.override_text_extractor(mock_extractor)
    return container


@pytest.fixture
def client(test_container):
    """
    TestClient wired to ``test_container``.

    Server exceptions are not re-raised so the catch-all handler's
    response can be asserted.
    """
    from fastapi.testclient import TestClient

    from pdf_qa.main import app
    from pdf_qa.services.container import get_container

    app.dependency_overrides[get_container] = lambda: test_container
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
