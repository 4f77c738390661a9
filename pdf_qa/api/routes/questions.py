"""Endpoint de preguntas sobre el texto de un documento."""

from typing import Any

import pydantic
from fastapi import APIRouter, Body, Depends

from pdf_qa.core.exceptions import InvalidBodyError, ValidationError
from pdf_qa.core.logging import get_logger
from pdf_qa.schemas import AnswerResponse, ErrorResponse, QuestionRequest
from pdf_qa.services.container import DependencyContainer, get_container

logger = get_logger(__name__)
router = APIRouter()

MISSING_FIELDS_MESSAGE = "Both question and pdf_text are required."


def parse_question_request(payload: Any) -> QuestionRequest:
    """
    Lee el cuerpo de /ask-question.

    Un cuerpo ausente o que no es un objeto JSON (form-urlencoded, array,
    escalar) cuenta como campos faltantes. Un objeto con campos de tipo
    incorrecto es un cuerpo invalido.
    """
    if not isinstance(payload, dict):
        raise ValidationError(MISSING_FIELDS_MESSAGE)

    try:
        request = QuestionRequest.model_validate(payload)
    except pydantic.ValidationError as e:
        raise InvalidBodyError(details=str(e)) from e

    if not request.is_complete:
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    return request


@router.post(
    "/ask-question",
    response_model=AnswerResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def ask_question(
    payload: Any = Body(default=None),
    container: DependencyContainer = Depends(get_container),
) -> AnswerResponse:
    """Responde una pregunta usando el texto que el cliente obtuvo en /upload-pdf."""
    logger.info("question received")
    request = parse_question_request(payload)

    answer = await container.answer_generator.answer(request.pdf_text, request.question)
    logger.info(f"Respuesta generada: {len(answer)} caracteres")
    return AnswerResponse(answer=answer)
