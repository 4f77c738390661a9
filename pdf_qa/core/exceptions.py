"""
Custom exceptions for the PDF Question Answering API.

This module provides a hierarchy of exceptions for consistent error handling
across the application. All exceptions inherit from PDFQABaseException and
carry the HTTP status code the API answers with.

Example:
    try:
        text = await extractor.extract(pdf_bytes)
    except ExtractionError as e:
        logger.error(f"Extraction failed: {e}")
"""

from typing import Optional


class PDFQABaseException(Exception):
    """
    Base exception class for all PDF QA errors.

    Attributes:
        message: Human-readable description of the error, sent to the client.
        details: Optional additional context for debugging (logged only).
        status_code: HTTP status used when the error reaches the API layer.
    """

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable description of the error.
            details: Optional additional context for debugging.
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation with optional details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(PDFQABaseException):
    """
    Exception raised when a request lacks a required field.

    The message is fixed per endpoint and returned verbatim with a 400.
    """

    status_code = 400


class ExtractionError(PDFQABaseException):
    """
    Exception raised when a document cannot be parsed as a PDF.

    Attributes:
        original_error: The underlying parser exception if available.
    """

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        details: Optional[str] = None,
    ) -> None:
        """
        Initialize extraction error.

        Args:
            message: Parser diagnostic text.
            original_error: The underlying parser exception if available.
            details: Optional additional context for debugging.
        """
        self.original_error = original_error
        if original_error is not None and details is None:
            details = type(original_error).__name__
        super().__init__(f"Error reading PDF: {message}", details)


class GenerationError(PDFQABaseException):
    """
    Exception raised when the inference provider call fails.

    This includes network failures, provider errors and quota/auth failures.
    No retry is attempted before raising.

    Attributes:
        model_name: Name of the LLM model that failed.
        original_error: The underlying provider exception if available.
    """

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
        details: Optional[str] = None,
    ) -> None:
        """
        Initialize generation error.

        Args:
            message: Provider error text.
            model_name: Name of the LLM model that failed.
            original_error: The underlying provider exception if available.
            details: Optional additional context for debugging.
        """
        self.model_name = model_name
        self.original_error = original_error
        if details is None and model_name:
            details = f"model: {model_name}"
        super().__init__(f"Error generating answer: {message}", details)


class InvalidBodyError(ValidationError):
    """
    Exception raised when a request body cannot be read into its schema.

    The client only gets the fixed message; the validation detail (which can
    include the submitted text) stays in ``details`` for the logs.
    """

    MESSAGE: str = "Invalid request body."

    def __init__(self, details: Optional[str] = None) -> None:
        super().__init__(self.MESSAGE, details)
