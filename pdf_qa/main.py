from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pdf_qa.api import router
from pdf_qa.core import InvalidBodyError, PDFQABaseException, get_logger, settings
from pdf_qa.schemas import HealthResponse, WelcomeResponse
from pdf_qa.services import check_groq_health

logger = get_logger(__name__)

WELCOME_MESSAGE = "Welcome to the PDF Question Answering API!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Iniciando PDF QA API [{settings.app_env}]")
    logger.info(f"Server running on http://localhost:{settings.port}")
    yield
    logger.info("Cerrando PDF QA API")


app = FastAPI(
    title="PDF Question Answering API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PDFQABaseException)
async def pdf_qa_exception_handler(request: Request, exc: PDFQABaseException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.method} {request.url.path} invalid body: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": InvalidBodyError.MESSAGE},
    )


# Exception handler global
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Something went wrong!", "message": str(exc)},
    )


# Routes
app.include_router(router, tags=["PDF QA"])


@app.get("/", response_model=WelcomeResponse)
async def read_root() -> WelcomeResponse:
    return WelcomeResponse(message=WELCOME_MESSAGE)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        env=settings.app_env,
        llm_reachable=await check_groq_health(),
    )
