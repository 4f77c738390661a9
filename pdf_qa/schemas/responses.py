from pydantic import BaseModel, Field


class WelcomeResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    env: str
    llm_reachable: bool


class UploadResponse(BaseModel):
    pdf_text: str = Field(description="Primeros 1000 caracteres del texto extraido")
    full_text: str = Field(description="Texto completo, para reenviarlo en /ask-question")


class AnswerResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
