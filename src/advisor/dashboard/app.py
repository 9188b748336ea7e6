"""FastAPI dashboard application factory serving the advisor JSON API."""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from advisor.dashboard.routes import api
from advisor.exceptions import AdvisorError
from advisor.snapshot import SnapshotAssembler

log = structlog.get_logger(__name__)


async def _advisor_error_handler(request: Request, exc: AdvisorError) -> JSONResponse:
    """Map lookup errors against fixed configuration tables to HTTP 400."""
    log.warning("advisor_request_rejected", path=request.url.path, error=str(exc))
    return JSONResponse(content={"error": str(exc)}, status_code=400)


def create_dashboard_app(assembler: SnapshotAssembler, lifespan: Any = None) -> FastAPI:
    """Create and configure the FastAPI dashboard application.

    Args:
        assembler: Snapshot assembler over the market context built at startup.
        lifespan: Optional async context manager for application lifespan events.

    Returns:
        Configured FastAPI application with the API router registered.
    """
    app = FastAPI(
        title="Investment Advisor Dashboard",
        lifespan=lifespan,
    )

    # Read-only after startup; route handlers only query it
    app.state.assembler = assembler

    app.add_exception_handler(AdvisorError, _advisor_error_handler)
    app.include_router(api.router, prefix="/api")

    return app
