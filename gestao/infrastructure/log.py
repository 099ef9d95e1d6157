# gestao/infrastructure/log.py
#
# Logging configuration for the API process.
#
# Design decisions:
#   - stdlib logging; modules call logging.getLogger(__name__) and never
#     configure handlers themselves. setup_logging runs once in the app factory.
#   - "json" format emits one JSON object per line for log collectors.
#   - CPF never reaches a log line in full: services log mascarar_documento().
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_LOGGER_RAIZ = "gestao"


class JsonFormatter(logging.Formatter):
    """Uma linha JSON por registro."""

    def format(self, record: logging.LogRecord) -> str:
        dados: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            dados["exception"] = self.formatException(record.exc_info)
        return json.dumps(dados, ensure_ascii=False)


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Configura o logger "gestao" (idempotente: troca o handler anterior)."""
    nivel = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logger = logging.getLogger(_LOGGER_RAIZ)
    logger.setLevel(nivel)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(nivel)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
