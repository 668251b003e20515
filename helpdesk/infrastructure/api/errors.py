"""Translate domain errors into JSON HTTP responses."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from helpdesk.domain.errors import (
    ConcurrentModificationError,
    HelpdeskError,
    NotFoundError,
    PreconditionFailedError,
)

_STATUS_CODES: list[tuple[type[HelpdeskError], int]] = [
    (NotFoundError, 404),
    (PreconditionFailedError, 409),
    (ConcurrentModificationError, 409),
]


def status_code_for(exc: HelpdeskError) -> int:
    for exc_type, code in _STATUS_CODES:
        if isinstance(exc, exc_type):
            return code
    return 400


async def helpdesk_error_handler(request: Request, exc: HelpdeskError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code_for(exc),
        content={"error": exc.kind, "detail": exc.message, **exc.details},
    )
