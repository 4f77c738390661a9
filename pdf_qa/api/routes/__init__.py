"""Coleccion de routers de la API."""

from pdf_qa.api.routes.documents import router as documents_router
from pdf_qa.api.routes.questions import router as questions_router

__all__ = ["documents_router", "questions_router"]
