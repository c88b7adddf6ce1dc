"""
Server entry point — FastAPI app setup and route configuration.
Sets up the FastAPI server with CORS and the analysis API routes.
The server is stateless: every request carries its own signal bundle.
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncGenerator
from typing import Any

import fastapi
import uvicorn
from fastapi.middleware import cors

import echoprint
from echoprint import config
from echoprint.analysis import anomaly, consistency, report, uniqueness
from echoprint.models import analysis, export, signals
from echoprint.utils import logger, serialization

log = logger.create_logger("Server")

_INTERPRETERS = {
    "uniqueness": uniqueness.interpret_uniqueness_score,
    "consistency": consistency.interpret_consistency_score,
    "anomaly": anomaly.interpret_anomaly_score,
}


@contextlib.asynccontextmanager
async def lifespan(_app: fastapi.FastAPI) -> AsyncGenerator[None]:
    """Log server start on startup."""
    settings = config.get_settings()
    log.section("EchoPrint Server Started")
    log.info("Environment", {"env": settings.environment, "version": echoprint.__version__})
    yield


app = fastapi.FastAPI(title="EchoPrint Analysis Server", version=echoprint.__version__, lifespan=lifespan)

# ============================================================================
# Middleware
# ============================================================================

app.add_middleware(
    cors.CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# API Routes
# ============================================================================


@app.get("/api/health")
async def health_endpoint() -> dict[str, Any]:
    return {"status": "ok", "version": echoprint.__version__}


@app.post("/api/analyze")
async def analyze_endpoint(bundle: signals.SignalBundle) -> analysis.AnalysisResult:
    """
    Analyze a collected signal bundle and return the full result.
    """
    log.info(
        "Incoming analysis request",
        {"browser": bundle.parsed_ua.browser.name, "os": bundle.parsed_ua.os.name},
    )
    return await report.analyze_fingerprint_async(bundle)


@app.post("/api/export")
async def export_endpoint(bundle: signals.SignalBundle) -> export.ExportReport:
    """
    Analyze a signal bundle and wrap bundle and result in an export document.
    """
    log.info("Incoming export request", {"browser": bundle.parsed_ua.browser.name})
    result = await report.analyze_fingerprint_async(bundle)
    return report.build_export_report(bundle, result, config.get_settings())


@app.get("/api/interpret/{axis}/{score}")
async def interpret_endpoint(
    axis: str,
    score: int = fastapi.Path(..., ge=0, le=100, description="Axis score between 0 and 100"),
) -> dict[str, Any]:
    """
    Return the interpretation band for a score on one axis.
    """
    interpret = _INTERPRETERS.get(axis)
    if interpret is None:
        raise fastapi.HTTPException(
            status_code=404,
            detail=f"Unknown axis {axis!r}, expected one of: {', '.join(_INTERPRETERS)}",
        )
    return serialization.to_wire(interpret(score))


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    settings = config.get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
