"""JSON API endpoints for symbols, snapshots, projections and presets."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from advisor.backtest.presets import STRATEGIES
from advisor.projection import CAPITAL_OPTIONS, TIME_RANGES, project_capital, resolve_time_range
from advisor.snapshot import SnapshotAssembler

router = APIRouter()


def _assembler(request: Request) -> SnapshotAssembler:
    return request.app.state.assembler


@router.get("/symbols")
async def get_symbols(request: Request) -> JSONResponse:
    """List configured symbols with name and sector."""
    return JSONResponse(content=_assembler(request).list_symbols())


@router.get("/strategies")
async def get_strategies() -> JSONResponse:
    """Return the built-in strategy configurations."""
    return JSONResponse(content=[config.to_dict() for config in STRATEGIES])


@router.get("/presets")
async def get_presets(request: Request) -> JSONResponse:
    """Return horizon and capital presets plus the query defaults."""
    settings = _assembler(request).settings
    return JSONResponse(content={
        "time_ranges": [{"label": label, "days": days} for label, days in TIME_RANGES.items()],
        "capital_options": list(CAPITAL_OPTIONS),
        "default_lookback_days": settings.default_lookback_days,
        "default_capital": settings.default_capital,
        "default_risk_tolerance": settings.default_risk_tolerance,
    })


@router.get("/snapshot/{symbol}")
async def get_snapshot(
    request: Request,
    symbol: str,
    lookback_days: int | None = Query(default=None, ge=1),
    capital: float | None = Query(default=None, gt=0),
) -> JSONResponse:
    """Snapshot for a symbol. Unknown symbols fall back to the first configured one.

    Query params:
        lookback_days: Trailing trading days to analyze.
        capital: Starting capital for strategy simulations.
    """
    snapshot = _assembler(request).get_snapshot(
        symbol.upper(), lookback_days=lookback_days, capital=capital
    )
    return JSONResponse(content=snapshot.to_dict())


@router.get("/snapshot/{symbol}/projection")
async def get_projection(
    request: Request,
    symbol: str,
    horizon: str = "6M",
    risk_tolerance: int | None = Query(default=None, ge=0, le=100),
    capital: float | None = Query(default=None, gt=0),
    lookback_days: int | None = Query(default=None, ge=1),
) -> JSONResponse:
    """Capital projection for a symbol over a horizon preset.

    Query params:
        horizon: One of 1M, 3M, 6M, 9M, 1Y (default 6M).
        risk_tolerance: Percent of capital exposed (default from settings).
        capital: Total capital (default from settings).
        lookback_days: Window used for the risk metrics (default: the
            horizon in trading days).
    """
    assembler = _assembler(request)
    horizon_days = resolve_time_range(horizon)
    if capital is None:
        capital = assembler.settings.default_capital
    if risk_tolerance is None:
        risk_tolerance = assembler.settings.default_risk_tolerance
    if lookback_days is None:
        lookback_days = horizon_days

    snapshot = assembler.get_snapshot(
        symbol.upper(), lookback_days=lookback_days, capital=capital
    )
    latest_close = snapshot.candles[-1].close if snapshot.candles else 0.0
    projection = project_capital(
        capital,
        risk_tolerance,
        snapshot.metrics,
        horizon_days,
        latest_close=latest_close,
        period_performance_pct=snapshot.period_performance_pct,
    )
    return JSONResponse(content={
        "symbol": snapshot.symbol,
        "horizon": horizon.upper(),
        "lookback_days": lookback_days,
        **projection.to_dict(),
    })
