from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.routes import router as routes_router
from src.domain.exceptions import MapDataError, RoutingError

app = FastAPI(title="MapPlanner")
app.include_router(routes_router)


@app.exception_handler(RoutingError)
async def routing_error_handler(request: Request, exc: RoutingError) -> JSONResponse:
    # Bad map data is a deployment problem, not a missing resource.
    status_code = 500 if isinstance(exc, MapDataError) else 404
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc) or exc.__class__.__name__},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON, including unexpected ones."""

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("MAPPLANNER_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (FileNotFoundError, RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
