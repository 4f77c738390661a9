from fastapi import APIRouter

from pdf_qa.api.routes import documents_router, questions_router

router = APIRouter()
router.include_router(documents_router)
router.include_router(questions_router)

__all__ = ["router"]
