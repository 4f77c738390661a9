"""
PDF text extraction.

Converts raw PDF bytes into plain text, page by page, in document order.
Layout and structure metadata are dropped. Parsing is blocking, so it runs
in a worker thread to keep the event loop free.

Example:
    extractor = PDFTextExtractor()
    text = await extractor.extract(pdf_bytes)
"""

import asyncio
import io

import pdfplumber

from pdf_qa.core.exceptions import ExtractionError
from pdf_qa.core.logging import get_logger

logger = get_logger(__name__)

PAGE_SEPARATOR = "\n\n"


class PDFTextExtractor:
    """Extracts the text layer of a PDF held in memory."""

    def __init__(self, page_separator: str = PAGE_SEPARATOR) -> None:
        self.page_separator = page_separator

    async def extract(self, pdf_bytes: bytes) -> str:
        """
        Extract the text content of a PDF document.

        Args:
            pdf_bytes: Raw document bytes as uploaded by the client.

        Returns:
            The text of every page joined by ``page_separator``. Pages with
            no text layer contribute an empty string.

        Raises:
            ExtractionError: If the buffer cannot be parsed as a PDF.
        """
        try:
            return await asyncio.to_thread(self._extract_sync, pdf_bytes)
        except Exception as e:
            logger.error(f"PDF extraction error: {type(e).__name__}: {e}")
            raise ExtractionError(str(e) or type(e).__name__, original_error=e) from e

    def _extract_sync(self, pdf_bytes: bytes) -> str:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]

        text = self.page_separator.join(pages)
        logger.info(f"PDF procesado: {len(pages)} páginas, {len(text)} caracteres")
        return text
