from pdf_qa.core.config import Settings, get_settings, settings
from pdf_qa.core.exceptions import (
    ExtractionError,
    GenerationError,
    InvalidBodyError,
    PDFQABaseException,
    ValidationError,
)
from pdf_qa.core.logging import get_logger

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "get_logger",
    "PDFQABaseException",
    "ValidationError",
    "InvalidBodyError",
    "ExtractionError",
    "GenerationError",
]
