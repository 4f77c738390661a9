from functools import lru_cache

import httpx
from langchain_groq import ChatGroq

from pdf_qa.core.config import settings
from pdf_qa.core.logging import get_logger

logger = get_logger(__name__)

GROQ_API_URL = "https://api.groq.com/openai/v1"

ANSWER_TEMPERATURE = 0.7
ANSWER_MAX_TOKENS = 150


@lru_cache
def get_llm(
    temperature: float = ANSWER_TEMPERATURE,
    max_tokens: int = ANSWER_MAX_TOKENS,
) -> ChatGroq:
    """
    Factory singleton para instancias de ChatGroq.

    Una sola instancia por proceso; el generador de respuestas la recibe por
    referencia.

    - max_retries: 0 (un fallo del proveedor se reporta de inmediato)
    - request_timeout: None (se usa el default del cliente)
    """
    logger.info(f"Inicializando LLM: {settings.groq_model} (temp={temperature}, max_tokens={max_tokens})")
    return ChatGroq(
        model=settings.groq_model,
        temperature=temperature,
        max_tokens=max_tokens,
        api_key=settings.groq_api_key,
        max_retries=0,
    )


async def check_groq_health() -> bool:
    """Verifica conectividad con Groq API."""
    try:
        async with httpx.AsyncClient(timeout=5.0) as client:
            response = await client.get(
                f"{GROQ_API_URL}/models",
                headers={"Authorization": f"Bearer {settings.groq_api_key}"},
            )
            return response.status_code == 200
    except httpx.HTTPError as e:
        logger.warning(f"Groq health check failed: {e}")
        return False
