"""Entry point for the investment advisor dashboard API.

Builds the market context once, wraps it in a SnapshotAssembler and serves
the JSON API with uvicorn.

Startup order:
1. AppSettings (configuration)
2. Logging setup
3. MarketContext (synthetic series + sentiment table)
4. SnapshotAssembler
5. FastAPI app + uvicorn server
"""

import asyncio
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from advisor.config import AppSettings
from advisor.dashboard.app import create_dashboard_app
from advisor.data.market import build_market_context
from advisor.logging import get_logger, setup_logging
from advisor.snapshot import SnapshotAssembler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log API startup and shutdown."""
    logger = get_logger("advisor.main")
    assembler: SnapshotAssembler = app.state.assembler
    logger.info(
        "advisor_api_started",
        symbols=assembler.context.symbols,
        reference_date=assembler.context.reference_date.isoformat(),
    )
    yield
    logger.info("advisor_api_stopped")


def build_app(settings: AppSettings) -> FastAPI:
    """Build the market context and the dashboard app from settings."""
    context = build_market_context(settings.market)
    assembler = SnapshotAssembler(context, settings.analytics, settings.snapshot)
    return create_dashboard_app(assembler, lifespan=lifespan)


async def run() -> None:
    """Run the dashboard API server."""
    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("advisor.main")

    app = build_app(settings)

    logger.info(
        "starting_dashboard",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
    )
    config = uvicorn.Config(
        app,
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        log_level="warning",
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
