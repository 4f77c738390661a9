from pdf_qa.schemas.requests import QuestionRequest
from pdf_qa.schemas.responses import (
    AnswerResponse,
    ErrorResponse,
    HealthResponse,
    UploadResponse,
    WelcomeResponse,
)

__all__ = [
    "QuestionRequest",
    "AnswerResponse",
    "ErrorResponse",
    "HealthResponse",
    "UploadResponse",
    "WelcomeResponse",
]
