"""
Answer generation over an extracted document.

Builds a two-message prompt from a bounded prefix of the document text and
the user's question, invokes the injected LLM once and normalizes the
completion into a single line.

The design follows the same dependency-injection approach as the rest of the
services: the LLM is passed in, so tests can substitute an ``AsyncMock``.

Example:
    generator = AnswerGenerator(llm=get_llm(), model_name=settings.groq_model)
    answer = await generator.answer(full_text, "Where did you work in 2020?")
"""

from typing import Any, List, Optional, Protocol, runtime_checkable

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from pdf_qa.core.exceptions import GenerationError
from pdf_qa.core.logging import get_logger
from pdf_qa.prompts import QA_SYSTEM_PROMPT, build_user_prompt

logger = get_logger(__name__)

# Hard truncation applied to the document before prompting; not configurable.
MAX_DOCUMENT_CHARS = 3000


@runtime_checkable
class LLMProtocol(Protocol):
    """
    Protocol defining the interface for LLM services.

    Any object with an async ``ainvoke`` returning something with a
    ``content`` attribute satisfies it, including ``ChatGroq`` and mocks.
    """

    async def ainvoke(self, messages: List[BaseMessage]) -> Any:
        ...


def normalize_answer(raw: str) -> str:
    """Collapse line breaks into single spaces and trim the result."""
    return raw.strip().replace("\r\n", " ").replace("\n", " ").replace("\r", " ").strip()


class AnswerGenerator:
    """
    Answers questions about a document using a chat model.

    Attributes:
        max_document_chars: Number of leading document characters sent to
            the model.
    """

    max_document_chars: int = MAX_DOCUMENT_CHARS

    def __init__(self, llm: LLMProtocol, model_name: Optional[str] = None) -> None:
        """
        Initialize the generator.

        Args:
            llm: Long-lived LLM handle implementing LLMProtocol.
            model_name: Model identifier, reported in errors.
        """
        self._llm = llm
        self._model_name = model_name

    def build_messages(self, document_text: str, question: str) -> List[BaseMessage]:
        """
        Build the system and user messages for a question.

        Only the first ``max_document_chars`` characters of the document are
        embedded in the user message.
        """
        truncated = document_text[: self.max_document_chars]
        return [
            SystemMessage(content=QA_SYSTEM_PROMPT),
            HumanMessage(content=build_user_prompt(truncated, question)),
        ]

    async def answer(self, document_text: str, question: str) -> str:
        """
        Answer a question about the given document text.

        Args:
            document_text: Full extracted text; silently truncated.
            question: The user's question, non-empty.

        Returns:
            The model completion on a single line, without surrounding
            whitespace.

        Raises:
            GenerationError: If the provider call fails. No retry is made.
        """
        messages = self.build_messages(document_text, question)
        logger.debug(
            f"Prompting model with {min(len(document_text), self.max_document_chars)} chars "
            f"of document text | Q: {question[:50]}"
        )

        try:
            response = await self._llm.ainvoke(messages)
        except Exception as e:
            logger.error(f"LLM API error: {type(e).__name__}: {e}")
            raise GenerationError(str(e), model_name=self._model_name, original_error=e) from e

        content = response.content if isinstance(response.content, str) else str(response.content)
        return normalize_answer(content)
