from pdf_qa.services.answer_generator import AnswerGenerator, LLMProtocol, normalize_answer
from pdf_qa.services.container import DependencyContainer, get_container, reset_container
from pdf_qa.services.llm_factory import check_groq_health, get_llm
from pdf_qa.services.text_extractor import PDFTextExtractor

__all__ = [
    "get_llm",
    "check_groq_health",
    "AnswerGenerator",
    "LLMProtocol",
    "normalize_answer",
    "PDFTextExtractor",
    "DependencyContainer",
    "get_container",
    "reset_container",
]
