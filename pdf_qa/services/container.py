"""
Dependency Injection Container.

This module provides a centralized container for the service's long-lived
collaborators: the LLM handle, the PDF text extractor and the answer
generator. Each is built lazily, once per process, and shared by reference
across requests.

Example:
    from pdf_qa.services.container import get_container

    container = get_container()
    answer = await container.answer_generator.answer(text, question)
"""

from functools import lru_cache
from typing import Optional

from pdf_qa.core.config import settings
from pdf_qa.services.answer_generator import AnswerGenerator, LLMProtocol
from pdf_qa.services.llm_factory import get_llm
from pdf_qa.services.text_extractor import PDFTextExtractor


class DependencyContainer:
    """
    Centralized container for application dependencies.

    Attributes:
        _llm: Cached LLM service instance.
        _text_extractor: Cached PDFTextExtractor instance.
        _answer_generator: Cached AnswerGenerator instance.
    """

    def __init__(self) -> None:
        """Initialize the container with lazy service references."""
        self._llm: Optional[LLMProtocol] = None
        self._text_extractor: Optional[PDFTextExtractor] = None
        self._answer_generator: Optional[AnswerGenerator] = None

    @property
    def llm(self) -> LLMProtocol:
        """
        Get the LLM service instance.

        Returns:
            LLM service for text generation.
        """
        if self._llm is None:
            self._llm = get_llm()
        return self._llm

    @property
    def text_extractor(self) -> PDFTextExtractor:
        if self._text_extractor is None:
            self._text_extractor = PDFTextExtractor()
        return self._text_extractor

    @property
    def answer_generator(self) -> AnswerGenerator:
        """
        Get the AnswerGenerator instance.

        The generator is built with the container's LLM, so overriding the
        LLM resets it.
        """
        if self._answer_generator is None:
            self._answer_generator = AnswerGenerator(
                llm=self.llm,
                model_name=settings.groq_model,
            )
        return self._answer_generator

    def reset(self) -> None:
        """Reset all cached services."""
        self._llm = None
        self._text_extractor = None
        self._answer_generator = None

    def override_llm(self, mock_llm: LLMProtocol) -> None:
        """
        Override the LLM service with a mock.

        Args:
            mock_llm: Mock LLM implementation for testing.
        """
        self._llm = mock_llm
        # Reset generator to pick up new LLM
        self._answer_generator = None

    def override_text_extractor(self, extractor: PDFTextExtractor) -> None:
        """Override the text extractor, e.g. with a mock for API tests."""
        self._text_extractor = extractor


@lru_cache(maxsize=1)
def get_container() -> DependencyContainer:
    """
    Get the singleton DependencyContainer instance.

    Uses lru_cache to ensure only one container exists per process. Routes
    receive it through FastAPI's ``Depends``, which tests can override.
    """
    return DependencyContainer()


def reset_container() -> None:
    """Clear the singleton so a fresh container is created on next access."""
    get_container.cache_clear()
