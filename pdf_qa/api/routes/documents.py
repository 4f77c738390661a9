"""Endpoint de carga y extraccion de texto de PDFs."""

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile

from pdf_qa.core.exceptions import ValidationError
from pdf_qa.core.logging import get_logger
from pdf_qa.schemas import ErrorResponse, UploadResponse
from pdf_qa.services.container import DependencyContainer, get_container

logger = get_logger(__name__)
router = APIRouter()

PREVIEW_CHARS = 1000
NO_FILE_MESSAGE = "No file uploaded."


@router.post(
    "/upload-pdf",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_pdf(
    file: UploadFile | str | None = File(default=None),
    container: DependencyContainer = Depends(get_container),
) -> UploadResponse:
    """Extrae el texto de un PDF y lo devuelve completo junto a un preview."""
    logger.info("file received")
    # Un campo "file" de texto plano no cuenta como archivo adjunto
    if not isinstance(file, StarletteUploadFile):
        raise ValidationError(NO_FILE_MESSAGE)

    try:
        content = await file.read()
    finally:
        await file.close()

    logger.debug(f"Archivo '{file.filename}': {len(content)} bytes")
    pdf_text = await container.text_extractor.extract(content)
    logger.info("pdf text extracted")

    # El servidor no guarda el texto: el cliente lo reenvia en /ask-question
    return UploadResponse(pdf_text=pdf_text[:PREVIEW_CHARS], full_text=pdf_text)
