from __future__ import annotations

import logging
import logging.config
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Optional

from pythonjsonlogger import jsonlogger

_session_id: ContextVar[Optional[str]] = ContextVar("chaincalc_session_id", default=None)


def current_session_id() -> Optional[str]:
    return _session_id.get()


@contextmanager
def session_scope(session_id: Optional[str] = None) -> Iterator[str]:
    """Tag every log record emitted inside the block with one console session id."""
    value = session_id or uuid.uuid4().hex[:12]
    token = _session_id.set(value)
    try:
        yield value
    finally:
        _session_id.reset(token)


class SessionContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = current_session_id() or "-"
        return True


def _build_logging_config(level: str = "WARNING", json_output: bool = True) -> Dict[str, Any]:
    formatter = {
        "format": "%(asctime)s %(levelname)s %(name)s %(message)s %(session_id)s",
        "datefmt": "%Y-%m-%dT%H:%M:%S%z",
    }
    level = level.upper()

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "session_context": {
                "()": SessionContextFilter,
            }
        },
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "fmt": formatter["format"],
                "datefmt": formatter["datefmt"],
            },
            "plain": {
                "format": formatter["format"],
                "datefmt": formatter["datefmt"],
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json" if json_output else "plain",
                "filters": ["session_context"],
            }
        },
        "loggers": {
            "chaincalc": {"handlers": ["default"], "level": level, "propagate": False},
        },
        "root": {"handlers": ["default"], "level": "WARNING"},
    }


def configure_logging(level: str = "WARNING", json_output: bool = True) -> None:
    logging.config.dictConfig(_build_logging_config(level, json_output))
