"""
Nastavení logování / Logging setup.
JSON v produkci, text při vývoji, volitelně denně rotovaný soubor.
JSON in production, plain text in development, optional daily-rotated file.
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from spolky.config import settings

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = getattr(record, "request_id", None)
        if request_id:
            log_entry["request_id"] = request_id
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging() -> None:
    """Nastavit root logger jednou při startu / Configure the root logger once at startup."""
    formatter: logging.Formatter = logging.Formatter(TEXT_FORMAT) if settings.DEBUG else JSONFormatter()

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [handler]

    if settings.LOG_FILE:
        Path(settings.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(settings.LOG_FILE, when="midnight", backupCount=30, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.root.handlers = handlers
    logging.root.setLevel(settings.LOG_LEVEL.upper())
