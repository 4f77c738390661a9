"""
Unit tests for the exception hierarchy.

The API layer renders ``exc.message`` with ``exc.status_code``; these tests
pin both.
"""

import pytest

from pdf_qa.core.exceptions import (
    ExtractionError,
    GenerationError,
    InvalidBodyError,
    PDFQABaseException,
    ValidationError,
)


class TestStatusCodes:

    @pytest.mark.parametrize(
        "exc, status_code",
        [
            (ValidationError("No file uploaded."), 400),
            (ExtractionError("bad xref"), 500),
            (GenerationError("timeout"), 500),
        ],
    )
    def test_status_code(self, exc, status_code):
        assert isinstance(exc, PDFQABaseException)
        assert exc.status_code == status_code


class TestMessages:

    def test_validation_message_is_verbatim(self):
        exc = ValidationError("Both question and pdf_text are required.")

        assert exc.message == "Both question and pdf_text are required."
        assert str(exc) == exc.message

    def test_extraction_message_prefixed(self):
        original = ValueError("Unexpected EOF")
        exc = ExtractionError(str(original), original_error=original)

        assert exc.message == "Error reading PDF: Unexpected EOF"
        assert exc.details == "ValueError"
        assert str(exc) == "Error reading PDF: Unexpected EOF | Details: ValueError"

    def test_generation_message_prefixed(self):
        exc = GenerationError("Invalid API Key", model_name="llama-3.3-70b-versatile")

        assert exc.message == "Error generating answer: Invalid API Key"
        assert "llama-3.3-70b-versatile" in str(exc)


class TestInvalidBodyError:

    def test_fixed_client_message(self):
        exc = InvalidBodyError(details="1 validation error for QuestionRequest ...")

        assert isinstance(exc, ValidationError)
        assert exc.status_code == 400
        assert exc.message == "Invalid request body."
        assert "QuestionRequest" in str(exc)
