import uvicorn

from pdf_qa.core.config import settings


def run() -> None:
    """Arranca uvicorn con host y puerto de la configuracion."""
    uvicorn.run(
        "pdf_qa.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
