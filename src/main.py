from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.lines import router as lines_router
from src.adapters.api.controllers.paths import router as paths_router
from src.adapters.api.controllers.stations import router as stations_router
from src.adapters.api.dependencies import get_settings
from src.domain.exceptions.records import (
    ConflictError,
    EntityNotFoundError,
    InvalidNameError,
)
from src.domain.exceptions.routing import RoutingError
from src.domain.exceptions.sections import SectionError

app = FastAPI(title="SubwayPath")
app.include_router(stations_router)
app.include_router(lines_router)
app.include_router(paths_router)


def _detail(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc) or exc.__class__.__name__},
    )


@app.exception_handler(SectionError)
@app.exception_handler(InvalidNameError)
async def invalid_request_handler(request: Request, exc: ValueError) -> JSONResponse:
    return _detail(400, exc)


@app.exception_handler(EntityNotFoundError)
async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return _detail(404, exc)


@app.exception_handler(RoutingError)
async def routing_error_handler(request: Request, exc: RoutingError) -> JSONResponse:
    # Unknown vertex or no route between the two stations.
    return _detail(404, exc)


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return _detail(409, exc)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON, whatever raised them."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = get_settings().reveal_errors
    if reveal or isinstance(exc, (RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
