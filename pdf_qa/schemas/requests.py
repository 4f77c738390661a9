from pydantic import BaseModel


class QuestionRequest(BaseModel):
    # Opcionales: la ausencia se reporta como 400, no como 422
    question: str | None = None
    pdf_text: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.question) and bool(self.pdf_text)
