import logging
import sys
from functools import lru_cache
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_NAME = "pdf_qa.log"
LOG_BACKUP_DAYS = 7

# pdfminer emite un registro por cada objeto del PDF en DEBUG; groq y httpx uno por request
_NOISY_LOGGERS = (
    "watchfiles",
    "watchfiles.main",
    "httpx",
    "httpcore",
    "groq",
    "pdfminer",
    "pdfplumber",
    "multipart",
    "python_multipart",
)


def build_file_handler(log_dir: Path) -> TimedRotatingFileHandler | None:
    """
    Crea el handler de archivo con rotación diaria en ``log_dir``.

    Retorna None si el directorio no se puede crear o escribir; el servicio
    sigue logueando solo por consola.
    """
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = TimedRotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            when="midnight",
            interval=1,
            backupCount=LOG_BACKUP_DAYS,
            encoding="utf-8",
        )
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    return handler


def _configure_root_logger(level: LogLevel, log_dir: Path) -> None:
    """Configura el logger raíz con handlers de consola y archivo."""
    root = logging.getLogger()
    if root.handlers:
        return

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(console_handler)

    file_handler = build_file_handler(log_dir)
    if file_handler is not None:
        root.addHandler(file_handler)

    root.setLevel(level)


@lru_cache(maxsize=128)
def get_logger(name: str) -> logging.Logger:
    """
    Retorna un logger configurado para el módulo especificado.

    Uso:
        from pdf_qa.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Mensaje")
    """
    from pdf_qa.core.config import settings

    _configure_root_logger(settings.log_level, settings.log_dir)
    return logging.getLogger(name)
