from __future__ import annotations

from typing import Any

from chaincalc.core.logging import current_session_id


class AppError(Exception):
    error_type: str = "APP_ERROR"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


def error_payload(exc: AppError) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "error": {
            "type": exc.error_type,
            "message": exc.message,
        }
    }
    if exc.details:
        payload["error"]["details"] = exc.details
    session_id = current_session_id()
    if session_id:
        payload["error"]["sessionId"] = session_id

    return payload
